"""soundstate: a toy audio player built from a sink, an effect chain and a state machine."""

__version__ = "0.1.0"
