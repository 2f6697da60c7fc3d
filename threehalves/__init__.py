"""Monte Carlo pricing of European, barrier and Asian options under the 3/2 stochastic volatility model."""

__version__ = "0.1.0"