"""Add users and credential tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, user_passwords and user_totp tables."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('identity', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('nickname', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('created', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('type', sa.Integer(), nullable=False),
        sa.Column('status', sa.Enum('ACTIVE', 'INACTIVE', name='userstatus'), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_identity'), 'users', ['identity'], unique=False)
    op.create_index(op.f('ix_users_status'), 'users', ['status'], unique=False)

    op.create_table('user_passwords', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('password', sa.LargeBinary(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_user_passwords_user_id'), 'user_passwords', ['user_id'], unique=False)

    op.create_table('user_totp', sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('secret', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('user_id'))


def downgrade() -> None:
    """Drop credential and users tables."""
    op.drop_table('user_totp')
    op.drop_index(op.f('ix_user_passwords_user_id'), table_name='user_passwords')
    op.drop_table('user_passwords')
    op.drop_index(op.f('ix_users_status'), table_name='users')
    op.drop_index(op.f('ix_users_identity'), table_name='users')
    op.drop_table('users')
    sa.Enum(name='userstatus').drop(op.get_bind(), checkfirst=True)
