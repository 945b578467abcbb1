"""Creator Studio: YouTube topic insights and storybook illustration apps."""

__version__ = "0.1.0"
