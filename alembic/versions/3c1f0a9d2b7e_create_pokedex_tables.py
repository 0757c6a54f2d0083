"""create pokedex tables

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-18 10:12:40.118302
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Lookup tables
    op.create_table(
        "types",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=32), nullable=False),
        sa.Column("color", sa.String(length=7), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_types_name"), "types", ["name"], unique=True)

    op.create_table(
        "abilities",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=64), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("effect", sa.Text(), nullable=True),
        sa.Column("is_hidden", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_abilities_name"), "abilities", ["name"], unique=True)

    op.create_table(
        "stats",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=32), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_stats_name"), "stats", ["name"], unique=True)

    op.create_table(
        "moves",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=64), nullable=False),
        sa.Column("category", sa.String(length=16), nullable=False),
        sa.Column("power", sa.Integer(), nullable=True),
        sa.Column("accuracy", sa.Integer(), nullable=True),
        sa.Column("pp", sa.Integer(), nullable=False),
        sa.Column("priority", sa.Integer(), nullable=False),
        sa.Column("type_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["type_id"], ["types.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("category IN ('physical', 'special', 'status')", name="ck_moves_category"),
    )
    op.create_index(op.f("ix_moves_name"), "moves", ["name"], unique=True)
    op.create_index(op.f("ix_moves_type_id"), "moves", ["type_id"], unique=False)

    op.create_table(
        "type_effectiveness",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("attacking_type_id", sa.Integer(), nullable=False),
        sa.Column("defending_type_id", sa.Integer(), nullable=False),
        sa.Column("multiplier", sa.Float(), nullable=False),
        sa.ForeignKeyConstraint(["attacking_type_id"], ["types.id"]),
        sa.ForeignKeyConstraint(["defending_type_id"], ["types.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("attacking_type_id", "defending_type_id", name="uq_type_effectiveness_pair"),
        sa.CheckConstraint("multiplier IN (0.0, 0.5, 1.0, 2.0)", name="ck_type_effectiveness_multiplier"),
    )
    op.create_index(
        op.f("ix_type_effectiveness_attacking_type_id"), "type_effectiveness", ["attacking_type_id"], unique=False
    )
    op.create_index(
        op.f("ix_type_effectiveness_defending_type_id"), "type_effectiveness", ["defending_type_id"], unique=False
    )

    # Pokemon
    op.create_table(
        "pokemon",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("pokedex_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=64), nullable=False),
        sa.Column("slug", sa.String(length=64), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("height", sa.Float(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("base_exp", sa.Integer(), nullable=False),
        sa.Column("capture_rate", sa.Integer(), nullable=False),
        sa.Column("is_legendary", sa.Boolean(), nullable=False),
        sa.Column("is_mythical", sa.Boolean(), nullable=False),
        sa.Column("generation", sa.Integer(), nullable=False),
        sa.Column("sprite_url", sa.String(length=255), nullable=True),
        sa.Column("sprite_shiny_url", sa.String(length=255), nullable=True),
        sa.Column("artwork_url", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_pokemon_pokedex_id"), "pokemon", ["pokedex_id"], unique=True)
    op.create_index(op.f("ix_pokemon_name"), "pokemon", ["name"], unique=True)
    op.create_index(op.f("ix_pokemon_slug"), "pokemon", ["slug"], unique=True)
    op.create_index(op.f("ix_pokemon_generation"), "pokemon", ["generation"], unique=False)
    op.create_index(op.f("ix_pokemon_is_legendary"), "pokemon", ["is_legendary"], unique=False)

    # Junction tables (rows go away with their pokemon)
    op.create_table(
        "pokemon_types",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("pokemon_id", sa.Integer(), nullable=False),
        sa.Column("type_id", sa.Integer(), nullable=False),
        sa.Column("slot", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["pokemon_id"], ["pokemon.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["type_id"], ["types.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("pokemon_id", "slot", name="uq_pokemon_types_pokemon_slot"),
    )
    op.create_index(op.f("ix_pokemon_types_pokemon_id"), "pokemon_types", ["pokemon_id"], unique=False)
    op.create_index(op.f("ix_pokemon_types_type_id"), "pokemon_types", ["type_id"], unique=False)

    op.create_table(
        "pokemon_abilities",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("pokemon_id", sa.Integer(), nullable=False),
        sa.Column("ability_id", sa.Integer(), nullable=False),
        sa.Column("slot", sa.Integer(), nullable=False),
        sa.Column("is_hidden", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["pokemon_id"], ["pokemon.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["ability_id"], ["abilities.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("pokemon_id", "slot", name="uq_pokemon_abilities_pokemon_slot"),
    )
    op.create_index(op.f("ix_pokemon_abilities_pokemon_id"), "pokemon_abilities", ["pokemon_id"], unique=False)
    op.create_index(op.f("ix_pokemon_abilities_ability_id"), "pokemon_abilities", ["ability_id"], unique=False)

    op.create_table(
        "pokemon_stats",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("pokemon_id", sa.Integer(), nullable=False),
        sa.Column("stat_id", sa.Integer(), nullable=False),
        sa.Column("base_stat", sa.Integer(), nullable=False),
        sa.Column("effort", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["pokemon_id"], ["pokemon.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["stat_id"], ["stats.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("pokemon_id", "stat_id", name="uq_pokemon_stats_pokemon_stat"),
    )
    op.create_index(op.f("ix_pokemon_stats_pokemon_id"), "pokemon_stats", ["pokemon_id"], unique=False)
    op.create_index(op.f("ix_pokemon_stats_stat_id"), "pokemon_stats", ["stat_id"], unique=False)

    op.create_table(
        "pokemon_moves",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("pokemon_id", sa.Integer(), nullable=False),
        sa.Column("move_id", sa.Integer(), nullable=False),
        sa.Column("learn_method", sa.String(length=32), nullable=False),
        sa.Column("level_learned", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["pokemon_id"], ["pokemon.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["move_id"], ["moves.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "pokemon_id", "move_id", "learn_method", name="uq_pokemon_moves_pokemon_move_method"
        ),
    )
    op.create_index(op.f("ix_pokemon_moves_pokemon_id"), "pokemon_moves", ["pokemon_id"], unique=False)
    op.create_index(op.f("ix_pokemon_moves_move_id"), "pokemon_moves", ["move_id"], unique=False)

    op.create_table(
        "evolutions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("from_pokemon_id", sa.Integer(), nullable=False),
        sa.Column("to_pokemon_id", sa.Integer(), nullable=False),
        sa.Column("trigger", sa.String(length=32), nullable=False),
        sa.Column("min_level", sa.Integer(), nullable=True),
        sa.Column("item", sa.String(length=64), nullable=True),
        sa.Column("location", sa.String(length=64), nullable=True),
        sa.Column("time_of_day", sa.String(length=16), nullable=True),
        sa.Column("condition", sa.String(length=255), nullable=True),
        sa.ForeignKeyConstraint(["from_pokemon_id"], ["pokemon.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["to_pokemon_id"], ["pokemon.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("from_pokemon_id", "to_pokemon_id", name="uq_evolutions_pair"),
    )
    op.create_index(op.f("ix_evolutions_from_pokemon_id"), "evolutions", ["from_pokemon_id"], unique=False)
    op.create_index(op.f("ix_evolutions_to_pokemon_id"), "evolutions", ["to_pokemon_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_evolutions_to_pokemon_id"), table_name="evolutions")
    op.drop_index(op.f("ix_evolutions_from_pokemon_id"), table_name="evolutions")
    op.drop_table("evolutions")

    op.drop_index(op.f("ix_pokemon_moves_move_id"), table_name="pokemon_moves")
    op.drop_index(op.f("ix_pokemon_moves_pokemon_id"), table_name="pokemon_moves")
    op.drop_table("pokemon_moves")

    op.drop_index(op.f("ix_pokemon_stats_stat_id"), table_name="pokemon_stats")
    op.drop_index(op.f("ix_pokemon_stats_pokemon_id"), table_name="pokemon_stats")
    op.drop_table("pokemon_stats")

    op.drop_index(op.f("ix_pokemon_abilities_ability_id"), table_name="pokemon_abilities")
    op.drop_index(op.f("ix_pokemon_abilities_pokemon_id"), table_name="pokemon_abilities")
    op.drop_table("pokemon_abilities")

    op.drop_index(op.f("ix_pokemon_types_type_id"), table_name="pokemon_types")
    op.drop_index(op.f("ix_pokemon_types_pokemon_id"), table_name="pokemon_types")
    op.drop_table("pokemon_types")

    op.drop_index(op.f("ix_pokemon_is_legendary"), table_name="pokemon")
    op.drop_index(op.f("ix_pokemon_generation"), table_name="pokemon")
    op.drop_index(op.f("ix_pokemon_slug"), table_name="pokemon")
    op.drop_index(op.f("ix_pokemon_name"), table_name="pokemon")
    op.drop_index(op.f("ix_pokemon_pokedex_id"), table_name="pokemon")
    op.drop_table("pokemon")

    op.drop_index(op.f("ix_type_effectiveness_defending_type_id"), table_name="type_effectiveness")
    op.drop_index(op.f("ix_type_effectiveness_attacking_type_id"), table_name="type_effectiveness")
    op.drop_table("type_effectiveness")

    op.drop_index(op.f("ix_moves_type_id"), table_name="moves")
    op.drop_index(op.f("ix_moves_name"), table_name="moves")
    op.drop_table("moves")

    op.drop_index(op.f("ix_stats_name"), table_name="stats")
    op.drop_table("stats")

    op.drop_index(op.f("ix_abilities_name"), table_name="abilities")
    op.drop_table("abilities")

    op.drop_index(op.f("ix_types_name"), table_name="types")
    op.drop_table("types")
