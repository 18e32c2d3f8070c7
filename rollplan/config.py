from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Helix
    DEFAULT_RUN_INCHES: float = 12.0

    # Complete rings
    DEFAULT_TANGENT_INCHES: float = 12.0

    # Chord / rise check — skipped at or below this CL diameter
    SAGITTA_MIN_DIAMETER: float = 100.0
    SAGITTA_CHORDS: List[float] = [60.0, 24.0, 12.0, 6.0, 3.0]

    # Minimum rollable CL diameter = OD × factor when no admin rule matches
    MIN_ROLL_FACTOR_STEEL: float = 8.0
    MIN_ROLL_FACTOR_STAINLESS: float = 8.0
    MIN_ROLL_FACTOR_ALUMINUM: float = 12.0

    # Optional JSON file with section size overrides (admin settings export)
    SECTION_SIZES_PATH: str = ""

    class Config:
        env_file = ".env"


settings = Settings()
