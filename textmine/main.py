from pathlib import Path

from textmine.config.settings import Settings
from textmine.corpus.token_loader import TokenFileLoader
from textmine.logging.logger import Log
from textmine.pipeline.processor import build_processor


def main() -> None:
    """Entry point: load settings -> read token file -> score -> print top terms."""
    settings = Settings()
    Log.configure(settings.log_level)

    occurrences = TokenFileLoader().load(Path(settings.token_file))
    context = build_processor(settings).process(occurrences)

    for row in context.top or []:
        print(f"{row.document_id}\t{row.term}\t{row.count}\t{row.tf_idf:.6f}")


if __name__ == "__main__":
    main()
