from pathlib import Path

from textmine.corpus.exceptions import TokenFileFormatError
from textmine.scoring.models import TokenOccurrence


class TokenFileLoader:
    """Reads pre-tokenized corpora: one ``document_id<TAB>term`` pair per line."""

    def load(self, path: Path) -> list[TokenOccurrence]:
        """Read token occurrences from disk.

        Raises:
            FileNotFoundError: if the file does not exist.
            TokenFileFormatError: if a non-blank line is not exactly two fields.
        """
        if not path.exists():
            raise FileNotFoundError(f"Token file not found: {path}")
        occurrences: list[TokenOccurrence] = []
        with path.open(encoding="utf-8") as handle:
            for line_number, line in enumerate(handle, start=1):
                line = line.rstrip("\r\n")
                if not line.strip():
                    continue
                parts = line.split("\t")
                if len(parts) != 2:
                    raise TokenFileFormatError(
                        f"{path}:{line_number}: expected 2 tab-separated fields, "
                        f"got {len(parts)}"
                    )
                occurrences.append(TokenOccurrence(document_id=parts[0], term=parts[1]))
        return occurrences
