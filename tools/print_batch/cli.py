import argparse
import sys
from pathlib import Path

from apps.worker.pdf_fill import PdfFillError, assemble_document, render_page
from packages.shared.models import SignerInfo
from packages.shared.transfer import ImportFormatError, parse_records_json, parse_signer_json


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Print surgery justifications onto the PDF template")
    parser.add_argument("--records", type=Path, required=True, help="Exported dataList.json")
    parser.add_argument("--template", type=Path, required=True, help="Single-page template PDF")
    parser.add_argument("--out", type=Path, required=True, help="Output PDF path")
    parser.add_argument("--signer", type=Path, default=None, help="Optional doctorInfo.json")
    parser.add_argument("--index", type=int, default=None, help="Print only the record at this position")

    args = parser.parse_args(argv)

    try:
        records = parse_records_json(args.records.read_bytes())
        signer = parse_signer_json(args.signer.read_bytes()) if args.signer else SignerInfo()
        template = args.template.read_bytes()
    except (OSError, ImportFormatError) as exc:
        print(f"Error reading input: {exc}", file=sys.stderr)
        return 1

    if not records:
        print("No records to print", file=sys.stderr)
        return 1

    try:
        if args.index is not None:
            if not 0 <= args.index < len(records):
                print(f"Index {args.index} out of range (0..{len(records) - 1})", file=sys.stderr)
                return 1
            data = render_page(records[args.index], template, signer)
            count = 1
        else:
            data = assemble_document(records, template, signer)
            count = len(records)
    except PdfFillError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_bytes(data)
    print(f"Success! {count} page(s) written to {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
