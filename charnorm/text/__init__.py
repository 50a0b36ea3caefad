"""Character inspection building blocks.

This package derives code point encodings, computes per-form normalization
records, and checks normalization invariance.
"""

from .encoding import derive_encoding, padded_hex_form, reference_hex_form, render_hex_form
from .forms import compute_forms, compute_profile, normalize_forms
from .invariance import compatible_forms, is_invariant

__all__ = [
    "compatible_forms",
    "compute_forms",
    "compute_profile",
    "derive_encoding",
    "is_invariant",
    "normalize_forms",
    "padded_hex_form",
    "reference_hex_form",
    "render_hex_form",
]
