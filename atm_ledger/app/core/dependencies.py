from functools import lru_cache

from ..services import Atm

@lru_cache()
def get_atm() -> Atm:
    return Atm()
