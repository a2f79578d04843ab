"""An entity-component game framework with OBJ and image loading, camera maths and a fixed-step loop."""

__version__ = "0.1.0"