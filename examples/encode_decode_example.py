"""Encoding and decoding examples.

Run from the project root:
    python examples/encode_decode_example.py
"""

from datetime import date

from codice_fiscale import Gender, Subject, decode, encode, normalize
from codice_fiscale.logging_audit import configure_logging
from codice_fiscale.utils.exceptions import CodeValidationError, GenerationError


def example_1_encode_subject():
    """Example 1: Compute the fiscal code of a subject."""
    print("=" * 80)
    print("EXAMPLE 1: Encoding a subject")
    print("=" * 80)

    subject = Subject(
        first_name="Giancarlo",
        last_name="Galan",
        birth_date=date(1956, 9, 10),
        gender=Gender.MALE,
        birth_place="Padova",
        birth_province="PD",
    )
    code = encode(subject)
    print(f"Fiscal code: {code}")
    print(f"Omocode variants: {len(code.all_omocodes())}")
    print()


def example_2_decode_omocode():
    """Example 2: Decode an omocode variant."""
    print("=" * 80)
    print("EXAMPLE 2: Decoding an omocode variant")
    print("=" * 80)

    variant = "RSSMRAT0A41F205W"
    print(f"Canonical form: {normalize(variant)}")

    data = decode(variant)
    print(f"  Birth date: {data.birth_date}")
    print(f"  Gender: {data.gender.value}")
    print(f"  Birth place: {data.birth_place} ({data.birth_province})")
    print()


def example_3_handle_errors():
    """Example 3: Generation and validation errors are typed."""
    print("=" * 80)
    print("EXAMPLE 3: Handling errors")
    print("=" * 80)

    try:
        encode(Subject("Mario", "Rossi", date(1980, 1, 1), Gender.MALE, "Atlantide", "XX"))
    except GenerationError as e:
        print(f"Generation failed: {e}")

    try:
        decode("RSSMRA70Z41F205Z")
    except CodeValidationError as e:
        print(f"Decoding failed: {e}")
    print()


if __name__ == "__main__":
    configure_logging(level="INFO", redact_pii=False)
    example_1_encode_subject()
    example_2_decode_omocode()
    example_3_handle_errors()
