"""Add residential registry tables

Revision ID: 3c9e1f7a2b40
Revises:
Create Date: 2026-10-19 09:30:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3c9e1f7a2b40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "residential_application",
        sa.Column("full_name", sa.String(), nullable=False),
        sa.Column("date_of_birth", sa.String(), nullable=False),
        sa.Column("gender", sa.Integer(), nullable=False),
        sa.Column("place_of_birth", sa.String(), nullable=False),
        sa.Column("nationality", sa.Integer(), nullable=False),
        sa.Column("marital_status", sa.String(), nullable=True),
        sa.Column("phone_number", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("id_number", sa.String(), nullable=False),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("current_address", sa.String(), nullable=False),
        sa.Column("start_of_residency", sa.String(), nullable=False),
        sa.Column("property_owner", sa.String(), nullable=False),
        sa.Column("relation_to_landlord", sa.String(), nullable=False),
        sa.Column("is_homeowner", sa.Boolean(), nullable=False),
        sa.Column("profession", sa.String(), nullable=False),
        sa.Column("profession_address", sa.String(), nullable=False),
        sa.Column("profession_phone", sa.String(), nullable=False),
        sa.Column("has_vehicle", sa.Boolean(), nullable=False),
        sa.Column("is_contract_renewal", sa.Boolean(), nullable=False),
        sa.Column("previous_residence_cert_number", sa.String(), nullable=True),
        sa.Column("previous_applications", sa.Integer(), nullable=False),
        sa.Column("application_number", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("principal", sa.String(length=255), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("created", sa.BigInteger(), nullable=False),
        sa.Column("last_updated", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("application_number"),
    )
    op.create_index(
        op.f("ix_residential_application_principal"),
        "residential_application",
        ["principal"],
        unique=False,
    )

    sequence_table = op.create_table(
        "application_sequence",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("last_number", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.bulk_insert(sequence_table, [{"id": 1, "last_number": 0}])

    op.create_table(
        "role_assignment",
        sa.Column("principal", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=16), nullable=False),
        sa.Column("updated_at", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("principal"),
    )


def downgrade():
    op.drop_table("role_assignment")
    op.drop_table("application_sequence")
    op.drop_index(
        op.f("ix_residential_application_principal"),
        table_name="residential_application",
    )
    op.drop_table("residential_application")
