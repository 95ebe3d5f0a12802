from app.generators.player_generator import PlayerGenerator
from app.generators.sample_data import SampleDataGenerator

__all__ = ["PlayerGenerator", "SampleDataGenerator"]
