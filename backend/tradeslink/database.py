import sqlite3
from pathlib import Path
from sqlalchemy import create_engine, event
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from tradeslink.config import settings


class Base(DeclarativeBase):
    pass


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine(db_path: Path | None = None):
    path = db_path or settings.db_path
    engine = create_engine(
        f"sqlite:///{path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine


engine = get_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


SCHEMA_SQL = """\
-- ============================================================
-- ACCOUNTS
-- ============================================================
CREATE TABLE IF NOT EXISTS accounts (
    id              TEXT PRIMARY KEY,
    role            TEXT NOT NULL CHECK(role IN ('client','contractor')),
    name            TEXT NOT NULL,
    email           TEXT NOT NULL UNIQUE COLLATE NOCASE,
    avatar          TEXT,
    company_name    TEXT,
    balance_credits INTEGER NOT NULL DEFAULT 0 CHECK(balance_credits >= 0),
    skills          TEXT NOT NULL DEFAULT '[]',
    rating          REAL NOT NULL DEFAULT 0,
    password_hash   TEXT,
    created_at      TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ','now'))
);

CREATE INDEX IF NOT EXISTS idx_accounts_role ON accounts(role);

-- ============================================================
-- PROFILES
-- ============================================================
CREATE TABLE IF NOT EXISTS profiles (
    id         TEXT PRIMARY KEY REFERENCES accounts(id) ON DELETE CASCADE,
    role       TEXT NOT NULL CHECK(role IN ('client','contractor')),
    data       TEXT NOT NULL,
    views      INTEGER NOT NULL DEFAULT 0,
    updated_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ','now'))
);

-- ============================================================
-- TRANSACTIONS
-- ============================================================
CREATE TABLE IF NOT EXISTS transactions (
    id          TEXT PRIMARY KEY,
    account_id  TEXT NOT NULL REFERENCES accounts(id) ON DELETE CASCADE,
    date        TEXT NOT NULL,
    description TEXT NOT NULL,
    amount      REAL NOT NULL,
    status      TEXT NOT NULL CHECK(status IN ('Completed','Failed')),
    invoice_url TEXT,
    created_at  TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_transactions_account ON transactions(account_id, created_at);

-- ============================================================
-- JOBS
-- ============================================================
CREATE TABLE IF NOT EXISTS jobs (
    id                TEXT PRIMARY KEY,
    title             TEXT NOT NULL,
    category          TEXT NOT NULL,
    budget_type       TEXT NOT NULL DEFAULT 'range' CHECK(budget_type IN ('fixed','range')),
    budget_amount     REAL,
    budget_min        REAL,
    budget_max        REAL,
    city              TEXT,
    country           TEXT,
    start_date        TEXT,
    duration_days     INTEGER NOT NULL DEFAULT 0,
    created_at        TEXT NOT NULL,
    posted_by_id      TEXT NOT NULL REFERENCES accounts(id),
    posted_by_company TEXT,
    status            TEXT NOT NULL DEFAULT 'Active'
                      CHECK(status IN ('Active','Completed','Closed')),
    views             INTEGER NOT NULL DEFAULT 0,
    applications      INTEGER NOT NULL DEFAULT 0 CHECK(applications >= 0),
    details           TEXT NOT NULL,
    photos            TEXT NOT NULL DEFAULT '[]'
);

CREATE INDEX IF NOT EXISTS idx_jobs_status ON jobs(status);
CREATE INDEX IF NOT EXISTS idx_jobs_posted_by ON jobs(posted_by_id);
CREATE INDEX IF NOT EXISTS idx_jobs_category ON jobs(category);

-- ============================================================
-- UNLOCKS (one per job and contractor)
-- ============================================================
CREATE TABLE IF NOT EXISTS job_unlocks (
    job_id                  TEXT NOT NULL REFERENCES jobs(id) ON DELETE CASCADE,
    contractor_id           TEXT NOT NULL REFERENCES accounts(id) ON DELETE CASCADE,
    contractor_name         TEXT NOT NULL,
    contractor_country_code TEXT NOT NULL,
    unlocked_at             TEXT NOT NULL,
    PRIMARY KEY (job_id, contractor_id)
);

CREATE INDEX IF NOT EXISTS idx_job_unlocks_contractor ON job_unlocks(contractor_id);

-- ============================================================
-- APPLICATIONS (one per job and contractor)
-- ============================================================
CREATE TABLE IF NOT EXISTS applications (
    id            TEXT PRIMARY KEY,
    job_id        TEXT NOT NULL REFERENCES jobs(id) ON DELETE CASCADE,
    contractor_id TEXT NOT NULL REFERENCES accounts(id) ON DELETE CASCADE,
    message       TEXT NOT NULL DEFAULT '',
    date_applied  TEXT NOT NULL,
    UNIQUE (job_id, contractor_id)
);

CREATE INDEX IF NOT EXISTS idx_applications_contractor ON applications(contractor_id);
"""


def init_db(db_path: Path | None = None):
    path = db_path or settings.db_path
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.executescript(SCHEMA_SQL)
    conn.close()
