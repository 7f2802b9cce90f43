"""Default configuration: the worked King Markov example."""

from kingmarkov.config.experiment import SimulationConfig

# 100,000 weeks on 10 islands, starting on island 10, population of island k = k.
DEFAULT_CONFIG = SimulationConfig()
