# -*- coding: utf-8 -*-
"""Goals domain (personalised calorie and macro targets)."""
