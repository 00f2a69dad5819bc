"""Create employees, departments and dept_emp tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("emp_no", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("first_name", sa.String(length=14), nullable=False),
        sa.Column("last_name", sa.String(length=16), nullable=False),
        sa.Column("gender", sa.String(length=1), nullable=False),
        sa.Column("hire_date", sa.Date(), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint("emp_no", name=op.f("pk_employees")),
    )
    op.create_table(
        "departments",
        sa.Column("dept_no", sa.String(length=4), nullable=False),
        sa.Column("dept_name", sa.String(length=40), nullable=False),
        sa.PrimaryKeyConstraint("dept_no", name=op.f("pk_departments")),
    )
    op.create_table(
        "dept_emp",
        sa.Column("emp_no", sa.Integer(), nullable=False),
        sa.Column("dept_no", sa.String(length=4), nullable=False),
        sa.Column("from_date", sa.Date(), nullable=False),
        sa.Column("to_date", sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(
            ["emp_no"],
            ["employees.emp_no"],
            name=op.f("fk_dept_emp_emp_no_employees"),
            ondelete="CASCADE",
            deferrable=True,
            initially="DEFERRED",
        ),
        sa.ForeignKeyConstraint(
            ["dept_no"],
            ["departments.dept_no"],
            name=op.f("fk_dept_emp_dept_no_departments"),
            ondelete="CASCADE",
            deferrable=True,
            initially="DEFERRED",
        ),
        sa.PrimaryKeyConstraint("emp_no", "dept_no", name=op.f("pk_dept_emp")),
    )


def downgrade() -> None:
    op.drop_table("dept_emp")
    op.drop_table("departments")
    op.drop_table("employees")
