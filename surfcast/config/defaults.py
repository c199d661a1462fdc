"""Default surf spots with known coordinates."""

from surfcast.config.schema import SpotConfig

DEFAULT_SPOTS: list[SpotConfig] = [
    SpotConfig(name="Manly", slug="manly", lat=-33.792726, lng=151.289824),
    SpotConfig(name="Bondi", slug="bondi", lat=-33.891475, lng=151.277831),
    SpotConfig(name="Snapper Rocks", slug="snapper-rocks", lat=-28.162844, lng=153.549725),
    SpotConfig(name="Bells Beach", slug="bells-beach", lat=-38.368495, lng=144.281418),
]
