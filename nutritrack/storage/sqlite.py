# -*- coding: utf-8 -*-
"""SQLite entry store."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

from ..exercise.models import ExerciseEntry, ExerciseEntryCreate
from ..food.models import FoodEntry, FoodEntryCreate
from ..goals.models import DailyGoals
from ..profile.models import UserProfile, UserProfileIn
from .base import EntryStore, iso_now, today


def connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: Path) -> None:
    conn = connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS food_entries (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                description TEXT NOT NULL,
                calories REAL NOT NULL,
                carbs REAL NOT NULL,
                protein REAL NOT NULL,
                fat REAL NOT NULL,
                timestamp TEXT NOT NULL,
                date TEXT NOT NULL
            );
            """
        )
        cur.execute("CREATE INDEX IF NOT EXISTS idx_food_entries_date ON food_entries(date);")
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS exercise_entries (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                activity TEXT NOT NULL,
                calories_burned REAL NOT NULL,
                duration INTEGER NOT NULL,
                timestamp TEXT NOT NULL,
                date TEXT NOT NULL
            );
            """
        )
        cur.execute("CREATE INDEX IF NOT EXISTS idx_exercise_entries_date ON exercise_entries(date);")
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS daily_goals (
                id INTEGER PRIMARY KEY CHECK (id = 1),
                calories REAL NOT NULL,
                carbs REAL NOT NULL,
                protein REAL NOT NULL,
                fat REAL NOT NULL
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS user_profile (
                id INTEGER PRIMARY KEY CHECK (id = 1),
                age INTEGER NOT NULL,
                gender TEXT NOT NULL,
                current_weight REAL NOT NULL,
                target_weight REAL NOT NULL,
                height REAL NOT NULL,
                activity_level TEXT NOT NULL,
                timeframe REAL NOT NULL DEFAULT 6,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            );
            """
        )
        conn.commit()
    finally:
        conn.close()


@contextmanager
def db_conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    conn = connect(db_path)
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()


def _range_clause(start: Optional[str], end: Optional[str]) -> tuple[str, list]:
    clauses: List[str] = []
    params: list = []
    if start:
        clauses.append("date >= ?")
        params.append(start)
    if end:
        clauses.append("date <= ?")
        params.append(end)
    where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
    return where, params


class SQLiteStore(EntryStore):
    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path
        init_db(db_path)

    def create_food_entry(self, entry: FoodEntryCreate) -> FoodEntry:
        timestamp = iso_now()
        date = entry.date or today()
        with db_conn(self.db_path) as conn:
            cur = conn.execute(
                """
                INSERT INTO food_entries (description, calories, carbs, protein, fat, timestamp, date)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (entry.description, entry.calories, entry.carbs, entry.protein, entry.fat, timestamp, date),
            )
            entry_id = cur.lastrowid
        return FoodEntry(
            id=entry_id,
            description=entry.description,
            calories=entry.calories,
            carbs=entry.carbs,
            protein=entry.protein,
            fat=entry.fat,
            timestamp=timestamp,
            date=date,
        )

    def get_food_entries(self, start: Optional[str] = None, end: Optional[str] = None) -> List[FoodEntry]:
        where, params = _range_clause(start, end)
        with db_conn(self.db_path) as conn:
            rows = conn.execute(f"SELECT * FROM food_entries{where} ORDER BY id ASC", params).fetchall()
        return [FoodEntry.model_validate(dict(row)) for row in rows]

    def delete_food_entry(self, entry_id: int) -> bool:
        with db_conn(self.db_path) as conn:
            cur = conn.execute("DELETE FROM food_entries WHERE id = ?", (entry_id,))
            return cur.rowcount > 0

    def create_exercise_entry(self, entry: ExerciseEntryCreate) -> ExerciseEntry:
        timestamp = iso_now()
        date = entry.date or today()
        with db_conn(self.db_path) as conn:
            cur = conn.execute(
                """
                INSERT INTO exercise_entries (activity, calories_burned, duration, timestamp, date)
                VALUES (?, ?, ?, ?, ?)
                """,
                (entry.activity, entry.calories_burned, entry.duration, timestamp, date),
            )
            entry_id = cur.lastrowid
        return ExerciseEntry(
            id=entry_id,
            activity=entry.activity,
            calories_burned=entry.calories_burned,
            duration=entry.duration,
            timestamp=timestamp,
            date=date,
        )

    def get_exercise_entries(self, start: Optional[str] = None, end: Optional[str] = None) -> List[ExerciseEntry]:
        where, params = _range_clause(start, end)
        with db_conn(self.db_path) as conn:
            rows = conn.execute(f"SELECT * FROM exercise_entries{where} ORDER BY id ASC", params).fetchall()
        return [ExerciseEntry.model_validate(dict(row)) for row in rows]

    def delete_exercise_entry(self, entry_id: int) -> bool:
        with db_conn(self.db_path) as conn:
            cur = conn.execute("DELETE FROM exercise_entries WHERE id = ?", (entry_id,))
            return cur.rowcount > 0

    def get_daily_goals(self) -> DailyGoals:
        with db_conn(self.db_path) as conn:
            row = conn.execute("SELECT calories, carbs, protein, fat FROM daily_goals WHERE id = 1").fetchone()
        if not row:
            return DailyGoals()
        return DailyGoals.model_validate(dict(row))

    def update_daily_goals(self, goals: DailyGoals) -> DailyGoals:
        with db_conn(self.db_path) as conn:
            conn.execute(
                """
                INSERT INTO daily_goals (id, calories, carbs, protein, fat) VALUES (1, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    calories = excluded.calories,
                    carbs = excluded.carbs,
                    protein = excluded.protein,
                    fat = excluded.fat
                """,
                (goals.calories, goals.carbs, goals.protein, goals.fat),
            )
        return self.get_daily_goals()

    def get_user_profile(self) -> Optional[UserProfile]:
        with db_conn(self.db_path) as conn:
            row = conn.execute(
                """
                SELECT age, gender, current_weight, target_weight, height, activity_level,
                       timeframe, created_at, updated_at
                FROM user_profile WHERE id = 1
                """
            ).fetchone()
        if not row:
            return None
        return UserProfile.model_validate(dict(row))

    def save_user_profile(self, profile: UserProfileIn) -> UserProfile:
        now = iso_now()
        with db_conn(self.db_path) as conn:
            conn.execute(
                """
                INSERT INTO user_profile (
                    id, age, gender, current_weight, target_weight, height,
                    activity_level, timeframe, created_at, updated_at
                ) VALUES (1, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    age = excluded.age,
                    gender = excluded.gender,
                    current_weight = excluded.current_weight,
                    target_weight = excluded.target_weight,
                    height = excluded.height,
                    activity_level = excluded.activity_level,
                    timeframe = excluded.timeframe,
                    updated_at = excluded.updated_at
                """,
                (
                    profile.age,
                    profile.gender,
                    profile.current_weight,
                    profile.target_weight,
                    profile.height,
                    profile.activity_level.value,
                    profile.timeframe,
                    now,
                    now,
                ),
            )
        saved = self.get_user_profile()
        if saved is None:
            raise RuntimeError("user profile was not written")
        return saved
