"""keyfilter-core -- Quick demo.

Run: python examples/demo.py
"""

import tempfile
from pathlib import Path

CUSTOMERS = """Nom;Ville;Notes
Alice Martin;Paris;Client fidèle
Bob Durand;Lyon;"Paris; Lyon; Nice"
Chloé Petit;Marseille;
David Roux;Nice;Nouveau client
"""

REFERENCE = """Ville
Paris
Nice
"""


def main():
    from keyfilter_core import analyse_file, compare_files

    work_dir = Path(tempfile.mkdtemp())
    customers = work_dir / "customers.csv"
    reference = work_dir / "reference.csv"
    customers.write_text(CUSTOMERS, encoding="utf-8")
    reference.write_text(REFERENCE, encoding="utf-8")

    # 1. Analyse one file
    print("=" * 60)
    print("1. ANALYSE")
    print("=" * 60)
    result = analyse_file(str(customers), keywords="lyon")
    print(f"  Keywords: {result['keywords']}")
    print(f"  Rows: {result['matched_rows']} of {result['total_rows']}")
    for row in result["preview"]:
        print(f"    {row['Nom']}: {row['Keywords found']}")
    print()

    # 2. Compare against a reference file
    print("=" * 60)
    print("2. COMPARE")
    print("=" * 60)
    result = compare_files(str(reference), str(customers))
    print(f"  Reference keywords: {result['keyword_text']}")
    print(f"  Rows: {result['matched_rows']} of {result['total_rows']}")
    for row in result["preview"]:
        found = row["Keywords found"].replace("\n", "; ")
        print(f"    {row['Nom']}: {found}")
    print()

    print(f"Done! Try the CLI: keyfilter compare {reference} {customers}")


if __name__ == "__main__":
    main()
