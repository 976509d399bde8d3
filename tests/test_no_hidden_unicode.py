from pathlib import Path

# Bidi/Hidden characters to check for
BIDI_CHARS = {
    '\u202A', '\u202B', '\u202C', '\u202D', '\u202E',  # LRE, RLE, PDF, LRO, RLO
    '\u2066', '\u2067', '\u2068', '\u2069',            # LRI, RLI, FSI, PDI
    '\u200E', '\u200F',                                # LRM, RLM
}

REPO_ROOT = Path(__file__).resolve().parents[1]
SCANNED = {
    "docsite": "*.py",
    "tests": "*.py",
    "config": "*.yaml",
    "db": "*.sql",
}


def test_no_hidden_unicode():
    """
    Scans sources, config and migrations for hidden/bidi unicode characters.
    """
    found_issues = []

    for root_dir, pattern in SCANNED.items():
        for path in sorted((REPO_ROOT / root_dir).rglob(pattern)):
            content = path.read_text(encoding="utf-8")
            for idx, char in enumerate(content):
                if char in BIDI_CHARS:
                    found_issues.append(f"{path}: char U+{ord(char):04X} at pos {idx}")

    assert not found_issues, "Found hidden/bidi unicode characters:\n" + "\n".join(found_issues)
