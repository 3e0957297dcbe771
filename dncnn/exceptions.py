"""
DnCNN Builder Exception Hierarchy.

DnCNNError (base, Exception)
└── DnCNNConfigError(DnCNNError, ValueError)   ← build parameter validation
    ├── InvalidImageSize                       ← image_size shape/type
    ├── InvalidDepth                           ← net_depth
    ├── InvalidWidth                           ← net_width
    ├── InvalidActivationKind                  ← relu_type
    └── InvalidLossKind                        ← loss_function

DnCNNConfigError multi-inherits from ValueError so callers can keep
generic ``except ValueError`` blocks around network construction.
"""


class DnCNNError(Exception):
    """Base exception for all DnCNN builder errors."""


class DnCNNConfigError(DnCNNError, ValueError):
    """Build parameter validation error (compatible with ValueError)."""


class InvalidImageSize(DnCNNConfigError):
    """``image_size`` is not an integer or a sequence of 1 to 3 positive integers."""


class InvalidDepth(DnCNNConfigError):
    """``net_depth`` is not an integer >= 2."""


class InvalidWidth(DnCNNConfigError):
    """``net_width`` is not an integer >= 1."""


class InvalidActivationKind(DnCNNConfigError):
    """``relu_type`` does not name a supported rectifier variant."""


class InvalidLossKind(DnCNNConfigError):
    """``loss_function`` does not name a supported regression loss."""
