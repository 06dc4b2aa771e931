"""Seed the word bank from a CSV file."""
from __future__ import annotations

import csv
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from wordbank.core.enums import PronunciationType
from wordbank.db.session import SessionLocal
from wordbank.schemas import PronunciationCreate, WordCreate
from wordbank.services.children import PronunciationService
from wordbank.services.words import WordService
from wordbank.utils.exceptions import EntityExistsError


def load_words_from_csv(csv_path: str) -> int:
    """Load words, plus one sample pronunciation where ``audio_url`` is set."""

    db = SessionLocal()
    words = WordService(db)
    pronunciations = PronunciationService(db, words.gateway)
    loaded = 0

    try:
        with open(csv_path, "r", encoding="utf-8") as file:
            for row in csv.DictReader(file):
                try:
                    words.create(
                        WordCreate(
                            id=row["id"],
                            word_name=row["word_name"],
                            definition=row.get("definition") or None,
                            phonetic_spelling=row.get("phonetic_spelling") or None,
                            sentence=row.get("sentence") or None,
                            level=int(row.get("level") or 1),
                        )
                    )
                except EntityExistsError:
                    continue

                if row.get("audio_url"):
                    pronunciations.create(
                        PronunciationCreate(
                            id=f"{row['id']}-sample",
                            word_id=row["id"],
                            type=PronunciationType.SAMPLE,
                            audio_url=row["audio_url"],
                            phonetic_spelling=row.get("phonetic_spelling") or None,
                        )
                    )
                loaded += 1
        return loaded
    finally:
        db.close()


def generate_sample_csv(output_path: Path | None = None) -> Path:
    """Write a small starter CSV."""

    sample_data = [
        ["id", "word_name", "definition", "phonetic_spelling", "sentence", "level", "audio_url"],
        ["8f7d1b9e3a2c5f6e", "aberration", "A departure from what is normal", "ab-uh-ray-shun", "The dip was an aberration.", "3", ""],
        ["1c9e2a7b4d3f8e60", "benevolent", "Well meaning and kindly", "buh-nev-uh-luhnt", "A benevolent smile.", "2", ""],
        ["2d0f3b8c5e4a9f71", "candid", "Truthful and straightforward", "kan-did", "Her candid reply surprised us.", "1", ""],
        ["3e1a4c9d6f5b0a82", "diligent", "Showing care in one's work", "dil-i-juhnt", "A diligent student.", "1", ""],
        ["4f2b5d0e7a6c1b93", "ephemeral", "Lasting a very short time", "ih-fem-er-uhl", "Fame can be ephemeral.", "4", ""],
    ]

    output_path = output_path or Path("words_sample.csv")

    with open(output_path, "w", encoding="utf-8", newline="") as file:
        writer = csv.writer(file)
        writer.writerows(sample_data)

    print(f"Sample CSV generated: {output_path}")
    return output_path


if __name__ == "__main__":  # pragma: no cover - CLI execution
    import argparse

    parser = argparse.ArgumentParser(description="Seed the word bank")
    parser.add_argument("--csv", type=str, help="Path to CSV file")
    parser.add_argument(
        "--generate-sample",
        action="store_true",
        help="Generate sample CSV",
    )

    args = parser.parse_args()

    if args.generate_sample:
        generate_sample_csv()
    elif args.csv:
        count = load_words_from_csv(args.csv)
        print(f"Successfully loaded {count} words")
    else:
        parser.error("Please specify --csv path or --generate-sample")
