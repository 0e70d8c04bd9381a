"""Models module.

This module provides the data models exchanged with the encoder and decoder.
"""

from codice_fiscale.models.subject import DecodedData, Gender, Subject

__all__ = [
    "DecodedData",
    "Gender",
    "Subject",
]
