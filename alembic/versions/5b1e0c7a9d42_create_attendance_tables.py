"""create users, attendance_records, school_settings, esp32_devices, student_faces

Revision ID: 5b1e0c7a9d42
Revises:
Create Date: 2026-10-18 09:12:44.107251

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '5b1e0c7a9d42'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('role', sa.Enum('student', 'teacher', 'admin', name='user_role'), nullable=False),
        sa.Column('full_name', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'attendance_records',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('time_in', sa.DateTime(), nullable=True),
        sa.Column('time_out', sa.DateTime(), nullable=True),
        sa.Column(
            'status',
            sa.Enum('present', 'excused', 'sick', 'absent', name='attendance_status'),
            nullable=False,
        ),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('rfid_code', sa.String(), nullable=True),
        sa.Column('device_id', sa.String(), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('face_verified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        # Upserts from the check-in form rely on this constraint
        sa.UniqueConstraint('user_id', 'date', name='uq_attendance_user_date'),
    )
    op.create_index('ix_attendance_records_id', 'attendance_records', ['id'])
    op.create_index('ix_attendance_records_user_id', 'attendance_records', ['user_id'])
    op.create_index('ix_attendance_records_rfid_code', 'attendance_records', ['rfid_code'])

    op.create_table(
        'school_settings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('radius_meters', sa.Float(), nullable=True),
        sa.Column('require_location_verification', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('require_face_verification', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('require_rfid', sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        'esp32_devices',
        sa.Column('device_id', sa.String(), primary_key=True),
        sa.Column('last_seen', sa.DateTime(), nullable=True),
    )

    op.create_table(
        'student_faces',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('face_image_reference', sa.Text(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_student_faces_id', 'student_faces', ['id'])
    op.create_index('ix_student_faces_user_id', 'student_faces', ['user_id'])


def downgrade() -> None:
    op.drop_table('student_faces')
    op.drop_table('esp32_devices')
    op.drop_table('school_settings')
    op.drop_table('attendance_records')
    op.drop_table('users')
    sa.Enum(name='attendance_status').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='user_role').drop(op.get_bind(), checkfirst=True)
