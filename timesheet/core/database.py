import sqlite3
from contextlib import contextmanager
from typing import Optional
import logging
from timesheet.core.config import ServerConfig
from timesheet.core.errors import StoreError

logger = logging.getLogger(__name__)

def normalize_name(name: Optional[str]) -> Optional[str]:
    """Key used to match work hours and roster rows by person name"""
    if name is None:
        return None
    return name.strip().casefold()

def _connect() -> sqlite3.Connection:
    conn = sqlite3.connect(ServerConfig.DATABASE_PATH)
    conn.row_factory = sqlite3.Row
    # Queries compare name_key(column) against a normalized parameter
    conn.create_function("name_key", 1, normalize_name, deterministic=True)
    return conn

@contextmanager
def get_db(failure_message: str = "Datenbankfehler."):
    """Yield a connection; store failures surface as StoreError(failure_message)"""
    try:
        conn = _connect()
    except sqlite3.Error as e:
        logger.error(f"{failure_message} Could not open {ServerConfig.DATABASE_PATH}: {e}")
        raise StoreError(failure_message) from e
    try:
        yield conn
    except sqlite3.Error as e:
        conn.rollback()
        logger.error(f"{failure_message} ({e})")
        raise StoreError(failure_message) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()

def row_to_dict(row: sqlite3.Row) -> dict:
    return {key: row[key] for key in row.keys()}

def init_database():
    with get_db("Fehler beim Erstellen der Tabellen.") as conn:
        cursor = conn.cursor()

        cursor.execute('''
            CREATE TABLE IF NOT EXISTS work_hours (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                date DATE NOT NULL,
                hours REAL,
                break_time REAL,
                comment TEXT,
                starttime TEXT,
                endtime TEXT
            )
        ''')

        # Every listing is ordered by date
        cursor.execute('''
            CREATE INDEX IF NOT EXISTS idx_work_hours_date
            ON work_hours (date)
        ''')

        cursor.execute('''
            CREATE TABLE IF NOT EXISTS employees (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                mo_hours REAL,
                di_hours REAL,
                mi_hours REAL,
                do_hours REAL,
                fr_hours REAL
            )
        ''')

        conn.commit()
        logger.info(f"Database initialized at {ServerConfig.DATABASE_PATH}")

def seed_test_data():
    """Add a sample roster for development/testing"""
    with get_db("Fehler beim Anlegen der Testdaten.") as conn:
        cursor = conn.cursor()

        cursor.execute("SELECT COUNT(*) FROM employees")
        count = cursor.fetchone()[0]

        if count > 0:
            logger.info(f"Database already has {count} employees")
            return

        test_employees = [
            ("Anna", 8, 8, 8, 8, 8),
            ("Bernd", 8, 8, 8, 8, 6),
            ("Carla", 4, 4, 4, 4, 0),
        ]

        cursor.executemany('''
            INSERT INTO employees (name, mo_hours, di_hours, mi_hours, do_hours, fr_hours)
            VALUES (?, ?, ?, ?, ?, ?)
        ''', test_employees)

        conn.commit()
        logger.info(f"Added {len(test_employees)} test employees to database")
