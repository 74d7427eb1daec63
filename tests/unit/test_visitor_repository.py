"""Tests for the visitor repository and service against a mocked table."""

from datetime import datetime, timedelta, timezone

import pytest

from brighten.models.visitor import MAX_PAGES_VISITED, ContactInfo, PageVisit, RawStorageData
from brighten.repositories.visitor import VisitorRepository
from brighten.services.visitor_service import VisitorService
from brighten.utils.exceptions import NotFoundError, ValidationError

T0 = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def _snapshot(**local) -> RawStorageData:
    return RawStorageData(cookies={"visitor_id": "v-1"}, local_storage=local)


class TestUpsertStorageSnapshot:
    """Tests for the atomic visitor upsert."""

    def test_first_report_creates_record(self, dynamodb_table):
        repo = VisitorRepository()

        visitor, created = repo.upsert_storage_snapshot("v-1", _snapshot(a="1"), now=T0)

        assert created is True
        assert visitor.visitor_id == "v-1"
        assert visitor.visit_count == 1
        assert visitor.first_visit == visitor.last_visit == T0
        assert visitor.status == "new"
        assert visitor.pages_visited == []
        assert visitor.raw_storage_data.local_storage == {"a": "1"}

    def test_second_report_replaces_snapshot_and_counts(self, dynamodb_table):
        repo = VisitorRepository()
        repo.upsert_storage_snapshot("v-1", _snapshot(a="1", b="2"), now=T0)

        visitor, created = repo.upsert_storage_snapshot(
            "v-1", _snapshot(c="3"), now=T0 + timedelta(seconds=30)
        )

        assert created is False
        assert visitor.visit_count == 2
        assert visitor.raw_storage_data.local_storage == {"c": "3"}
        assert visitor.first_visit == T0
        assert visitor.last_visit > visitor.first_visit

    def test_identical_reports_still_count(self, dynamodb_table):
        repo = VisitorRepository()
        snapshot = _snapshot(a="1")

        repo.upsert_storage_snapshot("v-1", snapshot, now=T0)
        repo.upsert_storage_snapshot("v-1", snapshot, now=T0 + timedelta(seconds=1))
        visitor, _ = repo.upsert_storage_snapshot("v-1", snapshot, now=T0 + timedelta(seconds=2))

        assert visitor.visit_count == 3
        assert visitor.raw_storage_data == snapshot

    def test_first_visit_fields_are_not_overwritten(self, dynamodb_table):
        repo = VisitorRepository()
        first, _ = repo.upsert_storage_snapshot("v-1", _snapshot(), now=T0)

        repo.save(repo.get_by_visitor_id("v-1").model_copy(update={"status": "contacted"}))
        later, _ = repo.upsert_storage_snapshot("v-1", _snapshot(), now=T0 + timedelta(days=1))

        assert later.id == first.id
        assert later.created_at == first.created_at
        assert later.status == "contacted"

    def test_records_are_independent(self, dynamodb_table):
        repo = VisitorRepository()
        repo.upsert_storage_snapshot("v-1", _snapshot(), now=T0)
        repo.upsert_storage_snapshot("v-2", _snapshot(), now=T0)

        assert repo.get_by_visitor_id("v-1").visit_count == 1
        assert repo.get_by_visitor_id("v-2").visit_count == 1


class TestPageViews:
    """Tests for the capped page-visit log."""

    def test_page_view_creates_visitor(self, dynamodb_table):
        repo = VisitorRepository()

        visitor = repo.record_page_view("v-9", PageVisit(path="/services", title="Services"))

        assert visitor.visit_count == 1
        assert [p.path for p in visitor.pages_visited] == ["/services"]

    def test_page_views_are_capped(self, dynamodb_table):
        repo = VisitorRepository()

        for i in range(MAX_PAGES_VISITED + 5):
            visitor = repo.record_page_view("v-1", PageVisit(path=f"/page/{i}"))

        assert len(visitor.pages_visited) == MAX_PAGES_VISITED
        assert visitor.pages_visited[0].path == "/page/5"
        assert visitor.pages_visited[-1].path == f"/page/{MAX_PAGES_VISITED + 4}"

    def test_page_view_does_not_touch_snapshot(self, dynamodb_table):
        repo = VisitorRepository()
        repo.upsert_storage_snapshot("v-1", _snapshot(a="1"), now=T0)

        visitor = repo.record_page_view("v-1", PageVisit(path="/"))

        assert visitor.raw_storage_data.local_storage == {"a": "1"}
        assert visitor.visit_count == 1


class TestVisitorService:
    """Tests for the visitor admin service."""

    def test_report_without_id_mints_one(self, dynamodb_table):
        visitor, created = VisitorService().record_storage_report({"storageData": {}})

        assert created is True
        assert len(visitor.visitor_id) == 36

    def test_cookie_id_wins_over_body_id(self, dynamodb_table):
        visitor, _ = VisitorService().record_storage_report(
            {"storageData": {}, "visitorId": "from-body"}, visitor_id="from-cookie"
        )

        assert visitor.visitor_id == "from-cookie"

    def test_malformed_snapshot_is_rejected(self, dynamodb_table):
        with pytest.raises(ValidationError):
            VisitorService().record_storage_report({"storageData": {"cookies": ["not", "a", "map"]}})

    def test_list_filters_searches_and_sorts(self, dynamodb_table):
        repo = VisitorRepository()
        repo.upsert_storage_snapshot("alpha", _snapshot(), now=T0)
        repo.upsert_storage_snapshot("beta", _snapshot(), now=T0 + timedelta(hours=1))
        repo.upsert_storage_snapshot("gamma", _snapshot(), now=T0 + timedelta(hours=2))

        service = VisitorService(repo)
        service.update("alpha", {"status": "contacted", "contactInfo": {"name": "Ada Lovelace"}})

        everyone = service.list()
        assert [v.visitor_id for v in everyone.items] == ["gamma", "beta", "alpha"]
        assert everyone.total == 3

        contacted = service.list(status="contacted")
        assert [v.visitor_id for v in contacted.items] == ["alpha"]

        assert [v.visitor_id for v in service.list(search="LOVELACE").items] == ["alpha"]
        assert [v.visitor_id for v in service.list(search="bet").items] == ["beta"]

        page_two = service.list(page=2, limit=2)
        assert [v.visitor_id for v in page_two.items] == ["alpha"]

    def test_update_sets_contact_and_notes(self, dynamodb_table):
        service = VisitorService()
        service.record_storage_report({"storageData": {}}, visitor_id="v-1")

        visitor = service.update(
            "v-1",
            {"status": "converted", "contactInfo": {"email": "lead@example.com"}, "notes": "Call back"},
        )

        stored = service.get("v-1")
        assert visitor.status == "converted"
        assert stored.contact_info == ContactInfo(email="lead@example.com")
        assert stored.notes == "Call back"
        assert stored.version == 2

    def test_update_rejects_unknown_status(self, dynamodb_table):
        service = VisitorService()
        service.record_storage_report({"storageData": {}}, visitor_id="v-1")

        with pytest.raises(ValidationError):
            service.update("v-1", {"status": "vip"})

    def test_delete(self, dynamodb_table):
        service = VisitorService()
        service.record_storage_report({"storageData": {}}, visitor_id="v-1")

        service.delete("v-1")

        with pytest.raises(NotFoundError):
            service.get("v-1")
        with pytest.raises(NotFoundError):
            service.delete("v-1")

    def test_export_csv(self, dynamodb_table):
        service = VisitorService()
        service.record_storage_report(
            {"storageData": {"cookies": {"visitor_id": "v-1", "pref": "a,b"}}}, visitor_id="v-1"
        )
        service.update("v-1", {"contactInfo": {"name": "Smith, Jane"}})

        csv_text, count = service.export_csv(include_storage=True)
        lines = csv_text.strip().split("\n")

        assert count == 1
        assert lines[0].startswith("Visitor ID,Name,Email")
        assert lines[0].endswith("Cookies,LocalStorage,SessionStorage")
        assert lines[1].startswith('v-1,"Smith, Jane",')
        assert '""pref"": ""a,b""' in lines[1]

        plain, _ = service.export_csv()
        assert "Cookies" not in plain
