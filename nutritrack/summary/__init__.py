# -*- coding: utf-8 -*-
"""Summary domain (daily totals vs. goals, activity calendar, export).

Aggregates over the food and exercise entries held by the entry store.
"""
