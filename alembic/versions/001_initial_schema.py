"""001 – Initial schema: employees, record collections, audit trail.

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00
"""

from alembic import op

# Revision identifiers
revision = "001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

RECORD_COLUMNS = """
            id           VARCHAR(36) PRIMARY KEY,
            employee_id  VARCHAR(36) NOT NULL REFERENCES employees(id) ON DELETE CASCADE,
"""

# (table, domain columns) for every per-employee collection
RECORD_TABLES: list[tuple[str, str]] = [
    ("education", """
            institution     VARCHAR(200),
            degree          VARCHAR(150),
            field_of_study  VARCHAR(150),
            start_date      DATE,
            end_date        DATE,
            description     TEXT
    """),
    ("employment_history", """
            effective_date  DATE         NOT NULL,
            status          VARCHAR(50)  NOT NULL,
            location        VARCHAR(100),
            division        VARCHAR(100),
            department      VARCHAR(100) NOT NULL,
            job_title       VARCHAR(150) NOT NULL,
            reports_to      VARCHAR(150),
            comment         TEXT
    """),
    ("compensation", """
            effective_date  DATE          NOT NULL,
            pay_rate        NUMERIC(12,2) NOT NULL,
            pay_type        VARCHAR(50)   NOT NULL,
            overtime        VARCHAR(50),
            change_reason   VARCHAR(100)  NOT NULL,
            comment         TEXT
    """),
    ("bonuses", """
            type              VARCHAR(100)  NOT NULL,
            amount            NUMERIC(12,2) NOT NULL,
            frequency         VARCHAR(50)   NOT NULL,
            eligibility_date  DATE,
            description       TEXT
    """),
    ("time_off", """
            type        VARCHAR(50),
            start_date  DATE,
            end_date    DATE,
            days        NUMERIC(6,2),
            status      VARCHAR(50),
            comment     TEXT
    """),
    ("documents", """
            category     VARCHAR(100),
            name         VARCHAR(255),
            file_name    VARCHAR(255),
            upload_date  DATE
    """),
    ("benefits", """
            type             VARCHAR(100),
            plan             VARCHAR(150),
            status           VARCHAR(50),
            enrollment_date  DATE
    """),
    ("dependents", """
            first_name     VARCHAR(100) NOT NULL,
            last_name      VARCHAR(100) NOT NULL,
            relationship   VARCHAR(50)  NOT NULL,
            date_of_birth  DATE         NOT NULL,
            ssn            VARCHAR(20),
            gender         VARCHAR(20),
            is_student     BOOLEAN      NOT NULL DEFAULT FALSE
    """),
    ("training", """
            name            VARCHAR(200),
            category        VARCHAR(100),
            status          VARCHAR(50),
            due_date        DATE,
            completed_date  DATE,
            credits         NUMERIC(6,2)
    """),
    ("assets", """
            category       VARCHAR(100),
            description    TEXT,
            serial_number  VARCHAR(100),
            date_assigned  DATE
    """),
    ("notes", """
            title       VARCHAR(200),
            content     TEXT,
            created_by  VARCHAR(150),
            created_at  TIMESTAMPTZ NOT NULL DEFAULT NOW()
    """),
    ("emergency_contacts", """
            first_name    VARCHAR(100),
            last_name     VARCHAR(100),
            relationship  VARCHAR(50),
            phone         VARCHAR(30),
            email         VARCHAR(255),
            address       TEXT
    """),
    ("onboarding", """
            task            VARCHAR(200),
            description     TEXT,
            due_date        DATE,
            status          VARCHAR(50),
            completed_date  DATE
    """),
    ("offboarding", """
            task            VARCHAR(200),
            description     TEXT,
            due_date        DATE,
            status          VARCHAR(50),
            completed_date  DATE
    """),
]


# ---------------------------------------------------------------------------
# UPGRADE
# ---------------------------------------------------------------------------


def upgrade() -> None:
    # ── 1. employees ──────────────────────────────────────────────────────
    op.execute("""
        CREATE TABLE employees (
            id            VARCHAR(36)  PRIMARY KEY,
            first_name    VARCHAR(100) NOT NULL,
            last_name     VARCHAR(100) NOT NULL,
            email         VARCHAR(255) NOT NULL UNIQUE,
            phone         VARCHAR(30),
            job_title     VARCHAR(150),
            department    VARCHAR(100),
            location      VARCHAR(100),
            hire_date     DATE,
            profile_data  JSONB,
            created_at    TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at    TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)
    op.execute("CREATE INDEX ix_employees_department ON employees(department)")
    op.execute("CREATE INDEX ix_employees_last_name  ON employees(last_name)")

    # ── 2. record collections ─────────────────────────────────────────────
    for table, columns in RECORD_TABLES:
        op.execute(f"CREATE TABLE {table} ({RECORD_COLUMNS}{columns})")
        op.execute(f"CREATE INDEX ix_{table}_employee_id ON {table}(employee_id)")

    # ── 3. audit_trail ────────────────────────────────────────────────────
    op.execute("""
        CREATE TABLE audit_trail (
            id           VARCHAR(36) PRIMARY KEY,
            actor        VARCHAR(100),
            action       VARCHAR(50) NOT NULL,
            entity_type  VARCHAR(50) NOT NULL,
            entity_id    VARCHAR(36) NOT NULL,
            old_values   JSONB,
            new_values   JSONB,
            ip_address   VARCHAR(45),
            created_at   TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)
    op.execute("CREATE INDEX ix_audit_trail_entity     ON audit_trail(entity_type, entity_id)")
    op.execute("CREATE INDEX ix_audit_trail_created_at ON audit_trail(created_at)")
    op.execute("CREATE INDEX ix_audit_trail_action     ON audit_trail(action)")


# ---------------------------------------------------------------------------
# DOWNGRADE
# ---------------------------------------------------------------------------


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS audit_trail")
    for table, _ in reversed(RECORD_TABLES):
        op.execute(f"DROP TABLE IF EXISTS {table}")
    op.execute("DROP TABLE IF EXISTS employees")
