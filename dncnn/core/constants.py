"""
Project-wide Constants.

Single source of truth for the fixed design parameters of the DnCNN
architecture and for the shared logger identity.

Module Attributes:
    LOGGER_NAME: Global logger identity used by all modules.
    CONV_KERNEL_SIZE: Spatial size of every convolutional kernel.
    LEAKY_RELU_SLOPE: Negative-region slope of the leaky rectifier.
    CLIPPED_RELU_CEILING: Upper clip threshold of the clipped rectifier.
    DEFAULT_NET_DEPTH: Default number of convolutional layers.
    DEFAULT_NET_WIDTH: Default number of filters per hidden convolution.
    MIN_NET_DEPTH: Smallest depth that still has an input and output conv.
"""

from typing import Final

# Global logger identity used by all modules to ensure log synchronization
LOGGER_NAME: Final[str] = "DnCNN"

# ARCHITECTURE CONSTANTS
# Not user-tunable: changing them changes the network family
CONV_KERNEL_SIZE: Final[tuple[int, int]] = (3, 3)
LEAKY_RELU_SLOPE: Final[float] = 0.01
CLIPPED_RELU_CEILING: Final[float] = 10.0

# BUILD DEFAULTS
DEFAULT_NET_DEPTH: Final[int] = 17
DEFAULT_NET_WIDTH: Final[int] = 64
MIN_NET_DEPTH: Final[int] = 2
MIN_NET_WIDTH: Final[int] = 1
