import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from docanalysis.config.settings import Settings
from docanalysis.database.repositories.document_repository import DocumentRepository
from docanalysis.database.repositories.job_repository import JobRepository
from docanalysis.logging.logger import Log
from docanalysis.processor.exceptions import FileReadError
from docanalysis.processor.file_loader import FileLoader
from docanalysis.processor.processor import build_processor
from docanalysis.worker.intake import UploadIntake
from docanalysis.worker.job_runner import JobRunner
from docanalysis.worker.worker import Worker


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docanalysis",
        description="Analyze uploaded files and print the resulting document records.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="files to analyze")
    parser.add_argument("--user", default="Current User", help="uploader recorded on each document")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load files -> queue uploads -> run worker until idle -> print records."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    processor = build_processor(settings)
    doc_repo = DocumentRepository()
    job_repo = JobRepository(settings.max_analysis_attempts)
    intake = UploadIntake(doc_repo, job_repo)
    loader = FileLoader()

    exit_code = 0
    for path in args.files:
        try:
            intake.submit(loader.load(path), uploaded_by=args.user)
        except (FileNotFoundError, FileReadError) as exc:
            Log.error(f"Skipping {path}: {exc}")
            exit_code = 1

    job_runner = JobRunner(processor, job_repo, doc_repo, settings)
    Worker(job_repo, job_runner, settings).run_until_idle()

    records = [asdict(record) for record in doc_repo.list_all()]
    json.dump(records, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
