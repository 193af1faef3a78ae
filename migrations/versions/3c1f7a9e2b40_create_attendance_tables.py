"""create_attendance_tables

Revision ID: 3c1f7a9e2b40
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f7a9e2b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TIME_OFF_TYPES = ('MEDICAL_LEAVE', 'VACATION', 'PERSONAL_LEAVE', 'MATERNITY_LEAVE', 'OTHER')


def audit_columns():
    return [
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True)),
        sa.Column('is_deleted', sa.Boolean(), default=False),
        sa.Column('created_by', sa.Integer()),
        sa.Column('updated_by', sa.Integer()),
    ]


def upgrade():
    op.create_table(
        'employees',
        *audit_columns(),
        sa.Column('employee_number', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(150), nullable=False),
        sa.Column('email', sa.String(100), unique=True),
        sa.Column('position', sa.String(100)),
        sa.Column('department', sa.String(100)),
        sa.Column('birth_date', sa.Date()),
        sa.Column('hire_date', sa.Date()),
        sa.Column('is_active', sa.Boolean(), default=True),
    )
    op.create_index('ix_employees_id', 'employees', ['id'])
    op.create_index('ix_employees_employee_number', 'employees', ['employee_number'], unique=True)

    op.create_table(
        'work_schedules',
        *audit_columns(),
        sa.Column('employee_id', sa.Integer(), sa.ForeignKey('employees.id'), nullable=False, unique=True),
        *[sa.Column(day, sa.Boolean(), nullable=False) for day in
          ('monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday')],
        *[sa.Column(f'{day}_minutes', sa.Integer()) for day in
          ('monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday')],
        sa.Column('daily_minutes', sa.Integer(), nullable=False),
        sa.Column('weekly_minutes', sa.Integer(), nullable=False),
        sa.Column('lunch_break_minutes', sa.Integer(), nullable=False),
        sa.Column('notes', sa.Text()),
    )
    op.create_index('ix_work_schedules_id', 'work_schedules', ['id'])

    op.create_table(
        'time_records',
        *audit_columns(),
        sa.Column('employee_id', sa.Integer(), sa.ForeignKey('employees.id'), nullable=False),
        sa.Column('date_time', sa.DateTime(), nullable=False),
        sa.Column('machine_number', sa.Integer()),
        sa.Column('is_manual', sa.Boolean(), default=False),
        sa.Column('import_batch_id', sa.String(50)),
        sa.Column('notes', sa.Text()),
        sa.UniqueConstraint('employee_id', 'date_time', name='uq_time_record_employee_datetime'),
    )
    op.create_index('ix_time_records_id', 'time_records', ['id'])
    op.create_index('ix_time_records_employee_id', 'time_records', ['employee_id'])
    op.create_index('ix_time_records_date_time', 'time_records', ['date_time'])

    op.create_table(
        'day_edits',
        *audit_columns(),
        sa.Column('employee_id', sa.Integer(), sa.ForeignKey('employees.id'), nullable=False),
        sa.Column('edit_date', sa.Date(), nullable=False),
        sa.Column('entry_time', sa.String(5)),
        sa.Column('snack_break_start', sa.String(5)),
        sa.Column('snack_break_end', sa.String(5)),
        sa.Column('lunch_start', sa.String(5)),
        sa.Column('lunch_end', sa.String(5)),
        sa.Column('exit_time', sa.String(5)),
        sa.Column('notes', sa.Text()),
        sa.UniqueConstraint('employee_id', 'edit_date', name='uq_day_edit_employee_date'),
    )
    op.create_index('ix_day_edits_id', 'day_edits', ['id'])
    op.create_index('ix_day_edits_employee_id', 'day_edits', ['employee_id'])

    op.create_table(
        'holidays',
        *audit_columns(),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('is_recurring', sa.Boolean(), default=False),
        sa.Column('is_active', sa.Boolean(), default=True),
    )
    op.create_index('ix_holidays_id', 'holidays', ['id'])

    op.create_table(
        'time_offs',
        *audit_columns(),
        sa.Column('employee_id', sa.Integer(), sa.ForeignKey('employees.id'), nullable=False),
        sa.Column('type', sa.Enum(*TIME_OFF_TYPES, name='timeofftype'), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('reason', sa.Text()),
        sa.Column('document_url', sa.String(255)),
        sa.Column('is_approved', sa.Boolean(), default=True),
        sa.Column('notes', sa.Text()),
    )
    op.create_index('ix_time_offs_id', 'time_offs', ['id'])
    op.create_index('ix_time_offs_employee_id', 'time_offs', ['employee_id'])

    op.create_table(
        'timesheets',
        *audit_columns(),
        sa.Column('employee_id', sa.Integer(), sa.ForeignKey('employees.id'), nullable=False),
        sa.Column('employee_name', sa.String(150), nullable=False),
        sa.Column('employee_number', sa.Integer()),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('total_days', sa.Integer(), nullable=False),
        sa.Column('worked_days', sa.Integer(), nullable=False),
        sa.Column('absent_days', sa.Integer(), nullable=False),
        sa.Column('time_off_days', sa.Integer(), nullable=False),
        sa.Column('holiday_days', sa.Integer(), nullable=False),
        sa.Column('total_minutes_worked', sa.Integer(), nullable=False),
        sa.Column('total_minutes_expected', sa.Integer(), nullable=False),
        sa.Column('balance_minutes', sa.Integer(), nullable=False),
        sa.Column('dsr_discounts', sa.Integer(), nullable=False),
        sa.Column('pdf_url', sa.String(255)),
        sa.Column('generated_by', sa.String(100)),
        sa.Column('generated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_timesheets_id', 'timesheets', ['id'])
    op.create_index('ix_timesheets_employee_id', 'timesheets', ['employee_id'])


def downgrade():
    op.drop_table('timesheets')
    op.drop_table('time_offs')
    op.drop_table('holidays')
    op.drop_table('day_edits')
    op.drop_table('time_records')
    op.drop_table('work_schedules')
    op.drop_table('employees')
    sa.Enum(name='timeofftype').drop(op.get_bind(), checkfirst=True)
