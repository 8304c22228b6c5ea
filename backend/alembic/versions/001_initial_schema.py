"""Initial UrbanSprout schema

Revision ID: 001
Create Date: 2026-10-01 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Plant table (quiz and catalog listings)
    op.create_table(
        'plant',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('plant_name', sa.String(200), nullable=False),
        sa.Column('image_url', sa.String(500), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('benefits', sa.Text(), nullable=False),
        sa.Column('days_to_grow', sa.Integer(), nullable=False, server_default='60'),
        sa.Column('maintenance', sa.String(20), nullable=False),
        sa.Column('sunlight', sa.String(20), nullable=False),
        sa.Column('space', sa.String(20), nullable=False),
        sa.Column('experience', sa.String(20), nullable=False),
        sa.Column('time', sa.String(20), nullable=False),
        sa.Column('category', sa.String(30), nullable=False),
        sa.Column('price', sa.String(50), nullable=False, server_default='₹20-40'),
        sa.Column('difficulty', sa.String(20), nullable=False, server_default='Easy'),
        sa.Column('growing_time', sa.String(50), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('archived', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_plant_id', 'plant', ['id'])
    op.create_index('ix_plant_plant_name', 'plant', ['plant_name'])
    op.create_index('ix_plant_sunlight', 'plant', ['sunlight'])
    op.create_index('ix_plant_space', 'plant', ['space'])
    op.create_index('ix_plant_experience', 'plant', ['experience'])
    op.create_index('ix_plant_time', 'plant', ['time'])
    op.create_index('ix_plant_is_active', 'plant', ['is_active'])
    op.create_index('ix_plant_archived', 'plant', ['archived'])
    op.create_index('ix_plant_quiz', 'plant', ['sunlight', 'space', 'experience', 'time'])
    op.create_index('ix_plant_category_difficulty', 'plant', ['category', 'difficulty'])

    # Suggestion sets keyed by the five quiz answers
    op.create_table(
        'plant_suggestion',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('combination_key', sa.String(200), nullable=False),
        sa.Column('space', sa.String(20), nullable=False),
        sa.Column('sunlight', sa.String(20), nullable=False),
        sa.Column('experience', sa.String(20), nullable=False),
        sa.Column('time', sa.String(20), nullable=False),
        sa.Column('purpose', sa.String(20), nullable=False),
        sa.Column('plants', sa.JSON(), nullable=False),
        sa.Column('recommendation_message', sa.Text(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_plant_suggestion_id', 'plant_suggestion', ['id'])
    op.create_index('ix_plant_suggestion_combination_key', 'plant_suggestion', ['combination_key'], unique=True)
    op.create_index(
        'ix_plant_suggestion_fields', 'plant_suggestion',
        ['space', 'sunlight', 'experience', 'time', 'purpose']
    )

    # Store products the chatbot may recommend
    op.create_table(
        'product',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(50), nullable=False),
        sa.Column('image', sa.String(500), nullable=True),
        sa.Column('price', sa.Float(), nullable=False, server_default='0'),
        sa.Column('chatbot_recommended', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_product_id', 'product', ['id'])
    op.create_index('ix_product_chatbot_recommended', 'product', ['chatbot_recommended'])


def downgrade() -> None:
    op.drop_table('product')
    op.drop_table('plant_suggestion')
    op.drop_table('plant')
