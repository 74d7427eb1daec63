"""Tests for Pydantic models."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from brighten.models.base import generate_ulid
from brighten.models.experience import Experience, years_since
from brighten.models.hero_section import HeroSection
from brighten.models.portfolio import CreatePortfolioRequest
from brighten.models.service import Service
from brighten.models.team_member import CreateTeamMemberRequest, TeamMember
from brighten.models.visitor import PageVisit, RawStorageData, StorageReport, Visitor


class TestBaseModel:
    """Tests for BaseModel."""

    def test_generate_ulid(self):
        """Test ULID generation."""
        ulid1 = generate_ulid()
        ulid2 = generate_ulid()

        assert len(ulid1) == 26
        assert ulid1 != ulid2

    def test_model_serialization_uses_camel_case(self):
        """Stored documents use camelCase attribute names."""
        service = Service(
            id="svc-1",
            title="Web Design",
            slug="web-design",
            description="Sites",
            icon="Code",
            image="/web.jpg",
            content="<p>x</p>",
            featured_project="PORTAL",
        )

        db_item = service.to_dynamodb()

        assert db_item["id"] == "svc-1"
        assert db_item["featuredProject"] == "PORTAL"
        assert db_item["isActive"] is True
        assert isinstance(db_item["createdAt"], str)
        assert "featured_project" not in db_item

    def test_none_values_are_dropped(self):
        service = Service(
            title="Web Design",
            slug="web-design",
            description="Sites",
            icon="Code",
            image="/web.jpg",
            content="<p>x</p>",
        )

        assert "featuredProject" not in service.to_dynamodb()

    def test_model_deserialization(self):
        """Test DynamoDB deserialization."""
        db_item = {
            "PK": "VISITOR",
            "SK": "VISITOR#abc",
            "id": "01HX",
            "visitorId": "abc",
            "visitCount": Decimal("3"),
            "firstVisit": "2024-01-01T12:00:00+00:00",
            "lastVisit": "2024-01-02T12:00:00+00:00",
            "createdAt": "2024-01-01T12:00:00+00:00",
            "updatedAt": "2024-01-02T12:00:00+00:00",
            "version": Decimal("1"),
        }

        visitor = Visitor.from_dynamodb(db_item)

        assert visitor.visitor_id == "abc"
        assert visitor.visit_count == 3
        assert isinstance(visitor.first_visit, datetime)
        assert visitor.status == "new"

    def test_floats_become_decimals(self):
        visitor = Visitor(
            visitor_id="abc",
            pages_visited=[PageVisit(path="/", time_spent=12.5)],
        )

        db_item = visitor.to_dynamodb()

        assert db_item["pagesVisited"][0]["timeSpent"] == Decimal("12.5")


class TestVisitor:
    """Tests for the Visitor model."""

    def test_visitor_keys(self):
        visitor = Visitor(visitor_id="abc")

        assert visitor.get_pk() == "VISITOR"
        assert visitor.get_sk() == "VISITOR#abc"

    def test_storage_values_are_kept_verbatim(self):
        """Snapshot values are never trimmed or coerced."""
        report = StorageReport.model_validate(
            {
                "storageData": {
                    "cookies": {"theme": " dark ", "token": "a=b=c"},
                    "localStorage": {"count": "42"},
                    "sessionStorage": {},
                }
            }
        )

        assert report.storage_data.cookies == {"theme": " dark ", "token": "a=b=c"}
        assert report.storage_data.local_storage == {"count": "42"}

    def test_raw_storage_dumps_camel_case(self):
        data = RawStorageData(local_storage={"k": "v"}).model_dump(by_alias=True)

        assert data == {"cookies": {}, "localStorage": {"k": "v"}, "sessionStorage": {}}


class TestContentModels:
    """Tests for content request validation."""

    def test_portfolio_color_must_be_hex(self):
        base = {
            "title": "Shop",
            "description": "An online shop",
            "category": ["web"],
            "image": "/shop.png",
            "technologies": ["Next.js"],
        }

        assert CreatePortfolioRequest.model_validate(base).color == "#F66526"

        with pytest.raises(ValidationError):
            CreatePortfolioRequest.model_validate({**base, "color": "orange"})

    def test_portfolio_requires_category(self):
        with pytest.raises(ValidationError):
            CreatePortfolioRequest.model_validate(
                {
                    "title": "Shop",
                    "description": "An online shop",
                    "category": [],
                    "image": "/shop.png",
                    "technologies": ["Next.js"],
                }
            )

    def test_team_member_defaults(self):
        request = CreateTeamMemberRequest.model_validate(
            {
                "name": "  Asha  ",
                "position": "Engineer",
                "education": "BSc",
                "email": "asha@example.com",
                "image": "/asha.png",
                "bio": "Builds things",
            }
        )

        assert request.name == "Asha"
        assert request.department == "other"

        member = TeamMember(**request.model_dump())
        assert member.social.linkedin is None

    def test_team_member_rejects_bad_email(self):
        with pytest.raises(ValidationError):
            CreateTeamMemberRequest.model_validate(
                {
                    "name": "Asha",
                    "position": "Engineer",
                    "education": "BSc",
                    "email": "not-an-email",
                    "image": "/asha.png",
                    "bio": "Builds things",
                }
            )


class TestExperience:
    """Tests for the experience section document."""

    def test_years_since(self):
        founded = date(2016, 12, 1)

        assert years_since(founded, date(2024, 11, 30)) == 7
        assert years_since(founded, date(2024, 12, 1)) == 8

    def test_years_of_experience_stat_is_computed(self):
        experience = Experience(
            title="Experience",
            subtitle="Since 2016",
            description="A track record",
            image="/exp.png",
            button_text="About us",
            button_link="/about",
            stats=[
                {"value": "0", "label": "Years", "isYearsOfExperience": True},
                {"value": "250+", "label": "Projects"},
            ],
        )

        data = experience.to_api(today=date(2025, 6, 1))

        assert data["stats"][0]["value"] == "8"
        assert data["stats"][1]["value"] == "250+"
        assert data["foundingDate"] == "2016-12-01"

    def test_created_at_is_timezone_aware(self):
        experience = Experience(
            title="Experience",
            subtitle="Since 2016",
            description="A track record",
            image="/exp.png",
            button_text="About us",
            button_link="/about",
        )

        assert experience.created_at.tzinfo == timezone.utc


class TestHeroSection:
    """Tests for the home-page hero document."""

    def test_ordered_lists_are_sorted_for_the_api(self):
        hero = HeroSection(
            services=[{"text": "SEO", "order": 2}, {"text": "Web", "order": 0}],
            social_links=[
                {"platform": "youtube", "url": "https://youtube.com", "order": 1},
                {"platform": "instagram", "url": "https://instagram.com", "order": 0},
            ],
            client_logos=[{"name": "M4M", "logoUrl": "/m4m.png"}],
        )

        data = hero.to_api()

        assert [s["text"] for s in data["services"]] == ["Web", "SEO"]
        assert [link["platform"] for link in data["socialLinks"]] == ["instagram", "youtube"]
        assert data["clientLogos"][0]["logoUrl"] == "/m4m.png"
        assert [s.text for s in hero.services] == ["SEO", "Web"]

    def test_defaults(self):
        hero = HeroSection()

        assert hero.title == "Brighten Solutions"
        assert hero.button_link == "/services"
        assert hero.client_section.enabled is True

    def test_unknown_platform_is_rejected(self):
        with pytest.raises(ValidationError):
            HeroSection(social_links=[{"platform": "myspace", "url": "https://myspace.com"}])
