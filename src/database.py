import sqlite3
import os


class Database:
    """Single SQLite connection shared by every query operation.

    Statement failures are raised to the caller; the operation that issued
    the statement decides how to report them.
    """

    def __init__(self, db_file="employee_tracker.db"):
        self.db_file = db_file
        self.conn = self.create_connection(db_file)
        try:
            self._apply_pragmas()
            self.create_tables()
        except Exception:
            self.close()
            raise
        print("Connected to the database")

    def create_connection(self, db_file):
        # in-memory databases have no path to resolve
        path = db_file if db_file == ":memory:" else os.path.abspath(db_file)
        print(f"[DB] Connecting to: {path}")
        conn = sqlite3.connect(path)
        conn.row_factory = sqlite3.Row
        return conn

    def _apply_pragmas(self):
        # references between tables are checked by the database, not the app
        self.conn.execute("PRAGMA foreign_keys = ON;")

    def create_tables(self):
        create_department_table = """
        CREATE TABLE IF NOT EXISTS department (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL
        );
        """
        create_role_table = """
        CREATE TABLE IF NOT EXISTS role (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            salary DECIMAL NOT NULL,
            department_id INTEGER NOT NULL REFERENCES department(id)
        );
        """
        create_employee_table = """
        CREATE TABLE IF NOT EXISTS employee (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            first_name TEXT NOT NULL,
            last_name TEXT NOT NULL,
            role_id INTEGER REFERENCES role(id),
            manager_id INTEGER REFERENCES employee(id)
        );
        """
        for statement in (create_department_table, create_role_table, create_employee_table):
            self.conn.execute(statement)
        self.conn.commit()

    def execute(self, query, params=None):
        """Run one parameterized statement and return its rows.

        Rows are fetched before the commit so ``RETURNING`` clauses are
        read back. On failure the transaction is rolled back and the
        ``sqlite3.Error`` is re-raised.
        """
        cursor = self.conn.cursor()
        try:
            cursor.execute(query, params if params is not None else ())
            rows = cursor.fetchall()
            self.conn.commit()
            return rows
        except sqlite3.Error:
            self.conn.rollback()
            raise
        finally:
            cursor.close()

    def close(self):
        if self.conn is None:
            return
        self.conn.close()
        self.conn = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
