"""matrix2d — compose 2D transform lists into affine matrices and decompose them back."""

__version__ = "0.1.0"
