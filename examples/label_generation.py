"""
Demo: GS1-128 label data

Encodes a few typical inventory labels, then decodes the data strings
back to human-readable text as a scanner-side check would.
"""

from gs1_label import (
    LABEL_TEMPLATES,
    apply_template,
    format_gs1_human_readable,
    format_gs1_to_dict,
    generate_gs1_code,
)


def print_label(title, template_key, params):
    """Encode one label and print the result."""
    print("\n" + "=" * 80)
    print(f"  {title} [{LABEL_TEMPLATES[template_key].name}]")
    print("=" * 80)

    params = apply_template(params, template_key)
    result = generate_gs1_code(params, template=template_key)

    if not result.ok:
        print("Errors:")
        for error in result.errors:
            print(f"  - {error}")
        return

    print(f"Data string:    {result.code.replace(chr(29), '<GS>')}")
    print(f"Human readable: {result.human_readable}")
    print(f"Decoded:        {format_gs1_human_readable(']C1' + result.code)}")
    for key, value in format_gs1_to_dict(result.code).items():
        print(f"  {key:25s}: {value}")
    for warning in result.warnings:
        print(f"  warning: {warning}")


def demo_labels():
    print_label("Medicine box", "PHARMA", {
        "gtin": "06285096000842",
        "lot": "GB2C",
        "serial": "71490437969853",
        "expirationDate": "2028-04-30",
        "count": "12",
    })

    print_label("Yogurt tray", "FOOD", {
        "gtin": "7501234567893",
        "lot": "L0425",
        "productionDate": "2025-04-01",
        "expirationDate": "2025-04-30",
    })

    print_label("Shipping case", "LOGISTICS", {
        "gtin": "10614141000415",
        "lot": "LOT-2024-001",
        "count": "48",
    })

    print_label("Phone without serial", "ELECTRONICS", {
        "gtin": "00614141123452",
    })


if __name__ == "__main__":
    demo_labels()
