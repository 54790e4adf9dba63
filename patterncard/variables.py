CONFIG = "config.toml"
OUTPUT = "output"
SEED_ENV = "PATTERNCARD_SEED"
