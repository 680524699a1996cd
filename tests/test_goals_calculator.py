# -*- coding: utf-8 -*-

from __future__ import annotations

import itertools
import unittest

from nutritrack.goals.calculator import (
    ActivityLevel,
    Profile,
    activity_multiplier,
    calculate_bmr,
    calculate_goals,
    calculate_macros,
    round_half_up,
    safe_weekly_change,
)


def _profile(**overrides) -> Profile:
    base = dict(
        age=30,
        gender="male",
        current_weight=90.0,
        target_weight=80.0,
        height=180.0,
        activity_level="moderately_active",
        timeframe=6,
    )
    base.update(overrides)
    return Profile(**base)


class TestCalculateGoals(unittest.TestCase):
    def test_male_moderate_loss_example(self) -> None:
        goals = calculate_goals(_profile())

        self.assertEqual(goals.bmr, 1880)
        self.assertEqual(goals.tdee, 2914)
        self.assertEqual(goals.weight_change_per_week, -0.38)
        # Adjustment uses the unrounded weekly rate (-0.3849 kg/week).
        self.assertEqual(goals.calorie_adjustment, -423)
        self.assertEqual(goals.calories, 2491)
        self.assertEqual(goals.protein, 160)
        self.assertEqual(goals.fat, 77)
        self.assertEqual(goals.carbs, 288)

    def test_female_floor_drives_macros(self) -> None:
        goals = calculate_goals(
            _profile(
                age=60,
                gender="female",
                current_weight=50.0,
                target_weight=45.0,
                height=150.0,
                activity_level="sedentary",
                timeframe=1,
            )
        )

        self.assertEqual(goals.calories, 1200)
        self.assertEqual(goals.bmr, 977)
        self.assertEqual(goals.tdee, 1172)
        # Reported rate and adjustment are not reconciled with the floor.
        self.assertEqual(goals.weight_change_per_week, -1.0)
        self.assertEqual(goals.calorie_adjustment, -1100)
        self.assertNotEqual(goals.calories, goals.tdee + goals.calorie_adjustment)
        # Macros come from 1200, not from the pre-floor 72 kcal.
        self.assertEqual(goals.protein, 90)
        self.assertEqual(goals.fat, 37)
        self.assertEqual(goals.carbs, 126)

    def test_male_floor_is_1500(self) -> None:
        goals = calculate_goals(
            _profile(
                age=80,
                current_weight=45.0,
                target_weight=40.0,
                height=150.0,
                activity_level="sedentary",
                timeframe=1,
            )
        )
        self.assertEqual(goals.calories, 1500)

    def test_equal_weights_still_recommend_minimum_gain(self) -> None:
        goals = calculate_goals(_profile(current_weight=80.0, target_weight=80.0, activity_level="sedentary"))

        self.assertEqual(goals.weight_change_per_week, 0.25)
        self.assertEqual(goals.calorie_adjustment, 275)
        self.assertEqual(goals.bmr, 1780)
        self.assertEqual(goals.tdee, 2136)
        self.assertEqual(goals.calories, 2411)
        # Not a loss, so 1.8 g/kg protein.
        self.assertEqual(goals.protein, 144)
        self.assertEqual(goals.fat, 75)
        self.assertEqual(goals.carbs, 290)

    def test_gain_is_capped_at_half_a_kilo(self) -> None:
        goals = calculate_goals(
            _profile(
                age=25,
                current_weight=60.0,
                target_weight=80.0,
                height=175.0,
                activity_level="very_active",
                timeframe=3,
            )
        )
        self.assertEqual(goals.weight_change_per_week, 0.5)
        self.assertEqual(goals.calorie_adjustment, 550)
        self.assertEqual(goals.bmr, 1574)
        self.assertEqual(goals.tdee, 2715)
        self.assertEqual(goals.calories, 3265)

    def test_slow_loss_is_raised_to_minimum(self) -> None:
        goals = calculate_goals(_profile(current_weight=100.0, target_weight=99.0, timeframe=12))
        self.assertEqual(goals.weight_change_per_week, -0.25)
        self.assertEqual(goals.calorie_adjustment, -275)

    def test_carbs_never_negative(self) -> None:
        goals = calculate_goals(
            _profile(
                age=90,
                gender="female",
                current_weight=40.0,
                target_weight=500.0,
                height=150.0,
                activity_level="sedentary",
                timeframe=1,
            )
        )
        self.assertEqual(goals.protein, 900)
        self.assertEqual(goals.carbs, 0)
        self.assertEqual(goals.calories, 1422)

    def test_unknown_activity_level_uses_sedentary(self) -> None:
        unknown = calculate_goals(_profile(activity_level="couch_potato"))
        sedentary = calculate_goals(_profile(activity_level="sedentary"))
        self.assertEqual(unknown, sedentary)

    def test_idempotent(self) -> None:
        profile = _profile(gender="female", activity_level="lightly_active")
        self.assertEqual(calculate_goals(profile), calculate_goals(profile))


class TestCalculatorProperties(unittest.TestCase):
    def _grid(self):
        return itertools.product(
            (18, 35, 60, 80),
            ("male", "female"),
            (45.0, 70.0, 110.0, 150.0),
            (45.0, 70.0, 110.0),
            (150.0, 170.0, 195.0),
            [level.value for level in ActivityLevel],
            (1, 6, 24),
        )

    def test_properties_over_grid(self) -> None:
        for age, gender, current, target, height, level, months in self._grid():
            profile = Profile(age, gender, current, target, height, level, months)
            goals = calculate_goals(profile)
            with self.subTest(profile=profile):
                floor = 1200 if gender == "female" else 1500
                self.assertGreaterEqual(goals.calories, floor)
                self.assertGreater(goals.bmr, 0)
                self.assertGreater(goals.tdee, 0)
                self.assertGreaterEqual(goals.carbs, 0)
                self.assertNotEqual(goals.weight_change_per_week, 0)
                if goals.weight_change_per_week < 0:
                    self.assertTrue(-1.0 <= goals.weight_change_per_week <= -0.25)
                else:
                    self.assertTrue(0.25 <= goals.weight_change_per_week <= 0.5)
                if goals.calories > floor:
                    # Fat grams are rounded, so allow half a gram either way.
                    self.assertAlmostEqual(goals.fat * 9 / goals.calories, 0.28, delta=4.5 / goals.calories)


class TestCalculatorPieces(unittest.TestCase):
    def test_bmr_sex_offsets(self) -> None:
        self.assertEqual(calculate_bmr(90, 180, 30, "male"), 1880)
        self.assertEqual(calculate_bmr(90, 180, 30, "female"), 1714)

    def test_activity_multipliers(self) -> None:
        self.assertEqual(activity_multiplier("sedentary"), 1.2)
        self.assertEqual(activity_multiplier("lightly_active"), 1.375)
        self.assertEqual(activity_multiplier("moderately_active"), 1.55)
        self.assertEqual(activity_multiplier("very_active"), 1.725)
        self.assertEqual(activity_multiplier("extremely_active"), 1.9)
        self.assertEqual(activity_multiplier(""), 1.2)

    def test_safe_weekly_change_bounds(self) -> None:
        self.assertEqual(safe_weekly_change(120, 60, 1), -1.0)
        self.assertEqual(safe_weekly_change(60, 120, 1), 0.5)
        self.assertAlmostEqual(safe_weekly_change(90, 80, 6), -10 / (6 * 4.33))

    def test_macros_split(self) -> None:
        macros = calculate_macros(2000, 70, is_weight_loss=False)
        self.assertEqual(macros["protein"], 126)
        self.assertEqual(macros["fat"], 62)
        # (2000 - 504 - 560) / 4 = 234
        self.assertEqual(macros["carbs"], 234)

    def test_round_half_up(self) -> None:
        self.assertEqual(round_half_up(1172.5), 1173)
        self.assertEqual(round_half_up(-423.5), -423)
        self.assertEqual(round_half_up(2.4), 2)
        self.assertEqual(round_half_up(-1.0, 2), -1.0)


if __name__ == "__main__":
    unittest.main()
