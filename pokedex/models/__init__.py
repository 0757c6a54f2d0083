# Import every model so relationship() strings resolve and Base.metadata is complete
from pokedex.models.ability import Ability
from pokedex.models.evolution import Evolution
from pokedex.models.move import Move
from pokedex.models.pokemon import Pokemon
from pokedex.models.pokemon_ability import PokemonAbility
from pokedex.models.pokemon_move import PokemonMove
from pokedex.models.pokemon_stat import PokemonStat
from pokedex.models.pokemon_type import PokemonType
from pokedex.models.stat import Stat
from pokedex.models.type import Type
from pokedex.models.type_effectiveness import TypeEffectiveness

__all__ = [
    "Ability",
    "Evolution",
    "Move",
    "Pokemon",
    "PokemonAbility",
    "PokemonMove",
    "PokemonStat",
    "PokemonType",
    "Stat",
    "Type",
    "TypeEffectiveness",
]
