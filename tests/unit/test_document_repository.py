import pytest

from docanalysis.database.exceptions import DocumentNotFoundError
from docanalysis.database.models import DocumentRecord
from docanalysis.database.repositories.document_repository import DocumentRepository


def _create(repo: DocumentRepository, name: str = "memo.txt") -> DocumentRecord:
    return repo.create(
        name=name,
        file_type="TXT",
        category="Documents",
        size_bytes=12,
        uploaded_by="Current User",
    )


class TestCreate:
    def test_new_record_is_processing(self) -> None:
        record = _create(DocumentRepository())
        assert record.status == "Processing"
        assert record.tags == []
        assert record.analysis is None
        assert record.processed_at is None

    def test_ids_are_unique(self) -> None:
        repo = DocumentRepository()
        assert _create(repo).id != _create(repo).id

    def test_list_all_keeps_insertion_order(self) -> None:
        repo = DocumentRepository()
        _create(repo, "a.txt")
        _create(repo, "b.txt")
        assert [r.name for r in repo.list_all()] == ["a.txt", "b.txt"]


class TestFind:
    def test_find_by_id(self) -> None:
        repo = DocumentRepository()
        record = _create(repo)
        assert repo.find_by_id(record.id).name == "memo.txt"

    def test_unknown_id_raises(self) -> None:
        with pytest.raises(DocumentNotFoundError):
            DocumentRepository().find_by_id("nope")

    def test_returned_records_are_copies(self) -> None:
        repo = DocumentRepository()
        record = _create(repo)
        repo.find_by_id(record.id).tags.append("mutated")
        assert repo.find_by_id(record.id).tags == []


class TestTransitions:
    def test_mark_processed(self) -> None:
        repo = DocumentRepository()
        record = _create(repo)

        repo.mark_processed(
            record.id,
            category="Invoice",
            tags=["invoice", "payment"],
            description="This invoice includes the following key points: Total.",
            analysis={"documentType": "Invoice"},
        )

        stored = repo.find_by_id(record.id)
        assert stored.status == "Processed"
        assert stored.category == "Invoice"
        assert stored.tags == ["invoice", "payment"]
        assert stored.description.startswith("This invoice")
        assert stored.analysis == {"documentType": "Invoice"}
        assert stored.processed_at is not None
        assert stored.updated_at >= record.updated_at

    def test_mark_degraded_keeps_category(self) -> None:
        repo = DocumentRepository()
        record = _create(repo)

        repo.mark_degraded(record.id, tags=["documents", "txt"], error="boom")

        stored = repo.find_by_id(record.id)
        assert stored.status == "Processed"
        assert stored.category == "Documents"
        assert stored.tags == ["documents", "txt"]
        assert stored.analysis is None
        assert stored.error_message == "boom"

    def test_update_unknown_id_raises(self) -> None:
        with pytest.raises(DocumentNotFoundError):
            DocumentRepository().mark_degraded("nope", tags=[], error="x")
