# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from nutritrack.analysis.parsing import (
    coerce_float,
    iter_json_objects,
    normalize_exercise,
    normalize_nutrition,
    parse_model_output_json,
)


class TestParseModelOutput(unittest.TestCase):
    def test_plain_and_fenced(self) -> None:
        self.assertEqual(parse_model_output_json('{"calories": 100}'), {"calories": 100})
        fenced = '```json\n{"calories": 210, "fat": 4}\n```'
        self.assertEqual(parse_model_output_json(fenced), {"calories": 210, "fat": 4})

    def test_prose_around_object(self) -> None:
        text = 'Sure! Here is the estimate: {"calories": 300, "note": "a {rough} guess"} Enjoy.'
        self.assertEqual(parse_model_output_json(text)["note"], "a {rough} guess")

    def test_trailing_commas_and_nan(self) -> None:
        parsed = parse_model_output_json('{"calories": 150, "fat": NaN, "carbs": [1, 2,],}')
        self.assertEqual(parsed, {"calories": 150, "fat": None, "carbs": [1, 2]})

    def test_infinity_becomes_null(self) -> None:
        self.assertEqual(parse_model_output_json('{"calories": Infinity}'), {"calories": None})

    def test_no_object(self) -> None:
        with self.assertRaises(ValueError):
            parse_model_output_json("no numbers here")
        with self.assertRaises(ValueError):
            parse_model_output_json("{not json at all}")

    def test_multiple_candidates(self) -> None:
        objects = list(iter_json_objects('{"a": 1} and {"b": {"c": 2}}'))
        self.assertEqual(objects, [{"a": 1}, {"b": {"c": 2}}])


class TestNormalize(unittest.TestCase):
    def test_nutrition_aliases_and_wrapping(self) -> None:
        parsed = {"totals": {"calories_kcal": "450 kcal", "carbohydrates": 52.5, "protein_g": 20, "fat": -3}}
        self.assertEqual(
            normalize_nutrition(parsed),
            {"calories": 450.0, "carbs": 52.5, "protein": 20.0, "fat": 0.0},
        )

    def test_nutrition_missing_macros_default_to_zero(self) -> None:
        self.assertEqual(normalize_nutrition({"calories": 80})["protein"], 0.0)

    def test_nutrition_requires_calories(self) -> None:
        with self.assertRaises(ValueError):
            normalize_nutrition({"carbs": 10})

    def test_exercise(self) -> None:
        result = normalize_exercise({"name": "Rowing", "minutes": "20", "calories": 210.4}, fallback_activity="row")
        self.assertEqual(result, {"activity": "Rowing", "duration": 20, "calories_burned": 210})

    def test_exercise_fallback_activity(self) -> None:
        result = normalize_exercise({"caloriesBurned": 99.5}, fallback_activity="stretching")
        self.assertEqual(result["activity"], "stretching")
        self.assertEqual(result["duration"], 0)
        self.assertEqual(result["calories_burned"], 100)

    def test_exercise_requires_calories(self) -> None:
        with self.assertRaises(ValueError):
            normalize_exercise({"activity": "Yoga", "duration": 30}, fallback_activity="yoga")

    def test_coerce_float(self) -> None:
        self.assertEqual(coerce_float("1,250 kcal"), 1250.0)
        self.assertIsNone(coerce_float(True))
        self.assertIsNone(coerce_float("about"))
        self.assertIsNone(coerce_float(None))


if __name__ == "__main__":
    unittest.main()
