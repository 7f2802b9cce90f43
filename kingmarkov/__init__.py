"""King Markov: a Metropolis random walk around a ring of islands."""

__version__ = "0.1.0"
