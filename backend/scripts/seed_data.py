"""
seed_data.py — Insert demo CASA cases and contact logs into Postgres.

WHAT THIS SCRIPT DOES:
  1. Connects to Postgres using a synchronous psycopg2 connection (simpler
     for a one-off script than the async engine used by the server).
  2. Creates the casa_cases and case_contacts tables if they don't exist.
  3. Inserts 12 cases: a mix of active/inactive and transition-aged youth,
     with every court report status represented.
  4. Gives each case 0–40 contact attempts spread over the last ~6 months,
     ending today, so the weekly counts in the API have recent data to show.

HOW TO RUN:
  cd backend
  source .venv/bin/activate
  python scripts/seed_data.py

NOTES:
  - Idempotent: a case_number that already exists is skipped.
  - The DATABASE_URL is read from backend/.env via python-dotenv.
"""

import os
import random
import uuid
from datetime import date, datetime, timedelta, timezone

import psycopg2
from dotenv import load_dotenv

# ------------------------------------------------------------------ #
# Load environment
# ------------------------------------------------------------------ #
_SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
_BACKEND_DIR = os.path.dirname(_SCRIPT_DIR)
load_dotenv(os.path.join(_BACKEND_DIR, ".env"))

# psycopg2 needs a plain "postgresql://" URL (not asyncpg)
_raw_url = os.environ["DATABASE_URL"]
SYNC_DATABASE_URL = _raw_url.replace("postgresql+asyncpg://", "postgresql://")


# ------------------------------------------------------------------ #
# Reference data
# ------------------------------------------------------------------ #
CASE_PREFIXES = ["CINA", "TPR"]

COURT_REPORT_STATUSES = ["not_submitted", "submitted", "in_review", "completed"]

CONTACT_TYPES = [
    "youth", "parent", "school", "therapist", "social_worker",
    "foster_parent", "medical", "court",
]

MEDIUM_TYPES = ["in-person", "text/email", "video", "voice-only", "letter"]

CONTACT_NOTES = [
    "Met with youth after school; discussed upcoming hearing.",
    "Left voicemail, no call back yet.",
    "Spoke with foster parent about weekend visitation schedule.",
    "Emailed teacher regarding attendance; awaiting reply.",
    "Video call with youth, doing well in new placement.",
    "Therapist unavailable, rescheduled for next week.",
    None,
]

# Days of history to spread contacts over (ending today)
HISTORY_DAYS = 180


# ------------------------------------------------------------------ #
# SQL
# ------------------------------------------------------------------ #
CREATE_CASES = """
CREATE TABLE IF NOT EXISTS casa_cases (
    id                        UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    case_number               VARCHAR(50) UNIQUE NOT NULL,
    active                    BOOLEAN NOT NULL DEFAULT TRUE,
    transition_aged_youth     BOOLEAN NOT NULL DEFAULT FALSE,
    birth_month_year_youth    DATE,
    court_report_status       VARCHAR(30) NOT NULL DEFAULT 'not_submitted',
    court_report_submitted_at TIMESTAMPTZ,
    created_at                TIMESTAMPTZ DEFAULT NOW(),
    updated_at                TIMESTAMPTZ DEFAULT NOW()
);"""

CREATE_CASE_CONTACTS = """
CREATE TABLE IF NOT EXISTS case_contacts (
    id               UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    casa_case_id     UUID NOT NULL REFERENCES casa_cases(id) ON DELETE CASCADE,
    occurred_at      TIMESTAMPTZ NOT NULL,
    contact_made     BOOLEAN NOT NULL DEFAULT FALSE,
    contact_types    VARCHAR(50)[] NOT NULL DEFAULT '{}',
    medium_type      VARCHAR(30),
    duration_minutes INTEGER,
    notes            TEXT
);"""

# The weekly-count query path filters by case and occurred_at
CREATE_CONTACTS_INDEX = """
CREATE INDEX IF NOT EXISTS case_contacts_case_occurred_idx
    ON case_contacts (casa_case_id, occurred_at DESC);
"""

INSERT_CASE = """
INSERT INTO casa_cases (
    id, case_number, active, transition_aged_youth, birth_month_year_youth,
    court_report_status, court_report_submitted_at, updated_at
)
VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
ON CONFLICT (case_number) DO NOTHING
RETURNING id;
"""

INSERT_CONTACT = """
INSERT INTO case_contacts (
    id, casa_case_id, occurred_at, contact_made, contact_types,
    medium_type, duration_minutes, notes
)
VALUES (%s, %s, %s, %s, %s, %s, %s, %s);
"""


# ------------------------------------------------------------------ #
# Generators
# ------------------------------------------------------------------ #
def generate_case(i: int, today: date) -> tuple:
    """Return the INSERT_CASE parameters for the i-th demo case."""
    case_number = f"{CASE_PREFIXES[i % 2]}-{22 + i % 3}-{i + 1:03d}"
    active = i % 5 != 4                 # every fifth case is closed
    age = random.randint(8, 19)
    birth_month = date(today.year - age, random.randint(1, 12), 1)
    transition_aged_youth = age >= 14
    status = COURT_REPORT_STATUSES[i % len(COURT_REPORT_STATUSES)]

    submitted_at = None
    if status != "not_submitted":
        submitted_at = datetime.now(timezone.utc) - timedelta(days=random.randint(5, 90))

    updated_at = datetime.now(timezone.utc) - timedelta(hours=random.randint(1, 500))

    return (
        str(uuid.uuid4()), case_number, active, transition_aged_youth,
        birth_month, status, submitted_at, updated_at,
    )


def generate_contact(case_id: str, now: datetime) -> tuple:
    """Return the INSERT_CONTACT parameters for one random contact attempt."""
    occurred_at = now - timedelta(
        days=random.randint(0, HISTORY_DAYS), hours=random.randint(0, 10)
    )
    contact_made = random.random() < 0.7
    contact_types = random.sample(CONTACT_TYPES, k=random.randint(1, 3))
    duration = random.choice([15, 30, 45, 60, 90]) if contact_made else None

    return (
        str(uuid.uuid4()), case_id, occurred_at, contact_made, contact_types,
        random.choice(MEDIUM_TYPES), duration, random.choice(CONTACT_NOTES),
    )


# ------------------------------------------------------------------ #
# Main
# ------------------------------------------------------------------ #
def main():
    random.seed(42)  # reproducible data

    print("Connecting to database…")
    conn = psycopg2.connect(SYNC_DATABASE_URL)
    conn.autocommit = False
    cur = conn.cursor()

    print("Creating tables…")
    for stmt in [CREATE_CASES, CREATE_CASE_CONTACTS, CREATE_CONTACTS_INDEX]:
        cur.execute(stmt)
    conn.commit()

    today = date.today()
    now = datetime.now(timezone.utc)
    total_contacts = 0

    for i in range(12):
        params = generate_case(i, today)
        case_number = params[1]
        print(f"\nInserting case {case_number}")

        cur.execute(INSERT_CASE, params)
        row = cur.fetchone()
        if row is None:
            print("  Case already exists, skipping contact insertion.")
            conn.commit()
            continue

        case_id = str(row[0])
        # Some cases get no contacts at all so the empty-log paths show up
        n_contacts = random.choice([0, random.randint(5, 40)])
        for _ in range(n_contacts):
            cur.execute(INSERT_CONTACT, generate_contact(case_id, now))
        total_contacts += n_contacts

        conn.commit()
        print(f"  Inserted {n_contacts} contacts.")

    cur.close()
    conn.close()

    print(f"\nDone. Total contacts inserted: {total_contacts}")
    print("Next step: uvicorn casa_cases.main:app --reload")


if __name__ == "__main__":
    main()
