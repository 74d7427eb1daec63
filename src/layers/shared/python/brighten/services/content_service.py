"""Content query and admin mutation service.

One ``ContentService`` per content type. Each type is described by a
``ContentType`` entry that names its model, its request models, the list
filters taken from the query string and the list ordering.
"""

from dataclasses import dataclass
from typing import Any, Callable

import structlog
from pydantic import ValidationError as PydanticValidationError

from brighten.models.about_hero import (
    DEFAULT_ABOUT_HERO,
    AboutHero,
    CreateAboutHeroRequest,
    UpdateAboutHeroRequest,
)
from brighten.models.achievement import (
    Achievement,
    CreateAchievementRequest,
    UpdateAchievementRequest,
)
from brighten.models.base import RequestModel, utc_now
from brighten.models.blog_post import BlogPost, CreateBlogPostRequest, UpdateBlogPostRequest
from brighten.models.company_value import (
    CompanyValue,
    CreateCompanyValueRequest,
    UpdateCompanyValueRequest,
)
from brighten.models.content import ContentEntity
from brighten.models.experience import (
    CreateExperienceRequest,
    Experience,
    UpdateExperienceRequest,
)
from brighten.models.gallery_image import (
    CreateGalleryImageRequest,
    GalleryImage,
    UpdateGalleryImageRequest,
)
from brighten.models.hero_section import (
    DEFAULT_HERO_SECTION,
    CreateHeroSectionRequest,
    HeroSection,
    UpdateHeroSectionRequest,
)
from brighten.models.our_story import (
    DEFAULT_OUR_STORY,
    CreateOurStoryRequest,
    OurStory,
    UpdateOurStoryRequest,
)
from brighten.models.portfolio import (
    CreatePortfolioRequest,
    PortfolioItem,
    UpdatePortfolioRequest,
)
from brighten.models.product import CreateProductRequest, Product, UpdateProductRequest
from brighten.models.service import CreateServiceRequest, Service, UpdateServiceRequest
from brighten.models.team_member import (
    CreateTeamMemberRequest,
    TeamMember,
    UpdateTeamMemberRequest,
)
from brighten.models.testimonial import (
    CreateTestimonialRequest,
    Testimonial,
    UpdateTestimonialRequest,
)
from brighten.repositories.content import ContentRepository
from brighten.utils.exceptions import NotFoundError, ValidationError
from brighten.utils.slugs import slugify

logger = structlog.get_logger()

Filter = Callable[[Any, dict[str, str]], bool]

ALL = "all"


def _selected(params: dict[str, str], name: str) -> str | None:
    """A choice filter value, ignoring the ``all`` sentinel."""
    value = params.get(name)
    if not value or value == ALL:
        return None
    return value


def _flag(params: dict[str, str], name: str) -> bool:
    return params.get(name) == "true"


def _product_filter(item: Product, params: dict[str, str]) -> bool:
    if _flag(params, "popular") and not item.popular:
        return False
    if _flag(params, "comingSoon") and not item.coming_soon:
        return False
    return True


def _portfolio_filter(item: PortfolioItem, params: dict[str, str]) -> bool:
    category = _selected(params, "category")
    if category and category not in item.category:
        return False
    if _flag(params, "featured") and not item.featured:
        return False
    return True


def _team_filter(item: TeamMember, params: dict[str, str]) -> bool:
    department = _selected(params, "department")
    return not department or item.department == department


def _achievement_filter(item: Achievement, params: dict[str, str]) -> bool:
    return not _flag(params, "featured") or item.is_featured


def _gallery_filter(item: GalleryImage, params: dict[str, str]) -> bool:
    category = _selected(params, "category")
    return not category or item.category == category


def _blog_filter(item: BlogPost, params: dict[str, str]) -> bool:
    category = _selected(params, "category")
    if category and item.category != category:
        return False
    tag = params.get("tag")
    if tag and tag not in item.tags:
        return False
    if _flag(params, "featured") and not item.featured:
        return False
    search = (params.get("search") or "").strip().lower()
    if search and not any(
        search in text.lower() for text in (item.title, item.excerpt, item.content)
    ):
        return False
    return True


@dataclass(frozen=True)
class ContentType:
    """How one content type is stored, validated, filtered and ordered."""

    name: str
    model: type[ContentEntity]
    create_request: type[RequestModel]
    update_request: type[RequestModel]
    # (attribute, descending), most significant first
    sort: tuple[tuple[str, bool], ...]
    filter: Filter | None = None
    # isActive=false in the query string lists inactive items instead
    active_param: bool = False
    # Published-only public listing
    published_only: bool = False
    # Always paginate public lists with this default page size
    default_limit: int | None = None


CONTENT_TYPES: dict[str, ContentType] = {
    ct.name: ct
    for ct in (
        ContentType(
            name="services",
            model=Service,
            create_request=CreateServiceRequest,
            update_request=UpdateServiceRequest,
            sort=(("sequence", False), ("created_at", True)),
        ),
        ContentType(
            name="products",
            model=Product,
            create_request=CreateProductRequest,
            update_request=UpdateProductRequest,
            sort=(("created_at", True),),
            filter=_product_filter,
        ),
        ContentType(
            name="portfolio",
            model=PortfolioItem,
            create_request=CreatePortfolioRequest,
            update_request=UpdatePortfolioRequest,
            sort=(("created_at", True),),
            filter=_portfolio_filter,
        ),
        ContentType(
            name="team",
            model=TeamMember,
            create_request=CreateTeamMemberRequest,
            update_request=UpdateTeamMemberRequest,
            sort=(("order", False), ("name", False)),
            filter=_team_filter,
            active_param=True,
        ),
        ContentType(
            name="achievements",
            model=Achievement,
            create_request=CreateAchievementRequest,
            update_request=UpdateAchievementRequest,
            sort=(("order", False), ("year", True)),
            filter=_achievement_filter,
            active_param=True,
        ),
        ContentType(
            name="values",
            model=CompanyValue,
            create_request=CreateCompanyValueRequest,
            update_request=UpdateCompanyValueRequest,
            sort=(("order", False),),
            active_param=True,
        ),
        ContentType(
            name="testimonials",
            model=Testimonial,
            create_request=CreateTestimonialRequest,
            update_request=UpdateTestimonialRequest,
            sort=(("order", False),),
        ),
        ContentType(
            name="gallery",
            model=GalleryImage,
            create_request=CreateGalleryImageRequest,
            update_request=UpdateGalleryImageRequest,
            sort=(("created_at", True),),
            filter=_gallery_filter,
        ),
        ContentType(
            name="blog",
            model=BlogPost,
            create_request=CreateBlogPostRequest,
            update_request=UpdateBlogPostRequest,
            sort=(("published_at", True), ("created_at", True)),
            filter=_blog_filter,
            published_only=True,
            default_limit=10,
        ),
        ContentType(
            name="experience",
            model=Experience,
            create_request=CreateExperienceRequest,
            update_request=UpdateExperienceRequest,
            sort=(("order", False), ("created_at", True)),
        ),
        ContentType(
            name="about-hero",
            model=AboutHero,
            create_request=CreateAboutHeroRequest,
            update_request=UpdateAboutHeroRequest,
            sort=(("updated_at", True),),
        ),
        ContentType(
            name="our-story",
            model=OurStory,
            create_request=CreateOurStoryRequest,
            update_request=UpdateOurStoryRequest,
            sort=(("updated_at", True),),
        ),
        ContentType(
            name="hero-section",
            model=HeroSection,
            create_request=CreateHeroSectionRequest,
            update_request=UpdateHeroSectionRequest,
            sort=(("updated_at", True),),
        ),
    )
}


def get_content_type(name: str) -> ContentType:
    """Look up a registered content type by its route name."""
    try:
        return CONTENT_TYPES[name]
    except KeyError:
        raise NotFoundError("Content type", name)


def sort_items(items: list[Any], keys: tuple[tuple[str, bool], ...]) -> list[Any]:
    """Stable multi-key sort; missing values always sort last."""
    result = list(items)
    for attr, descending in reversed(keys):
        present = [i for i in result if getattr(i, attr, None) is not None]
        missing = [i for i in result if getattr(i, attr, None) is None]
        present.sort(key=lambda i: getattr(i, attr), reverse=descending)
        result = present + missing
    return result


@dataclass
class ListResult:
    """One page (or all) of a content listing."""

    items: list[Any]
    total: int
    page: int | None = None
    limit: int | None = None
    paginated: bool = False


def validate_request(request_model: type[RequestModel], payload: dict[str, Any]) -> RequestModel:
    """Validate a request body against a request model.

    Raises:
        ValidationError: With the first failing field in the message.
    """
    try:
        return request_model.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e)


class ContentService:
    """List, fetch and mutate one content type."""

    def __init__(
        self,
        content_type: str | ContentType,
        repository: ContentRepository | None = None,
    ):
        if isinstance(content_type, str):
            content_type = get_content_type(content_type)
        self.content_type = content_type
        self.model = content_type.model
        self.repo = repository or ContentRepository(content_type.model)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def _visible(self, params: dict[str, str], include_inactive: bool) -> list[Any]:
        items = self.repo.list_all()
        if include_inactive:
            return items

        want_active = True
        if self.content_type.active_param and params.get("isActive") == "false":
            want_active = False
        items = [i for i in items if i.is_active == want_active]

        if self.content_type.published_only:
            items = [i for i in items if i.is_published]
        return items

    def list(
        self,
        params: dict[str, str] | None = None,
        page: int | None = None,
        limit: int | None = None,
        include_inactive: bool = False,
    ) -> ListResult:
        """List items matching the query-string filters, in display order.

        Args:
            params: Query string parameters (filters).
            page: 1-based page number. Paginates when given.
            limit: Page size. Paginates when given.
            include_inactive: Admin listing (drafts and soft-deleted items).
        """
        params = params or {}
        items = self._visible(params, include_inactive)

        if self.content_type.filter:
            items = [i for i in items if self.content_type.filter(i, params)]

        items = sort_items(items, self.content_type.sort)
        total = len(items)

        if page is None and limit is None and self.content_type.default_limit is None:
            return ListResult(items=items, total=total)

        page = page or 1
        limit = limit or self.content_type.default_limit or total or 1
        start = (page - 1) * limit
        return ListResult(
            items=items[start : start + limit],
            total=total,
            page=page,
            limit=limit,
            paginated=True,
        )

    def get_by_id(self, item_id: str) -> Any:
        """Fetch one item regardless of its active flag.

        Raises:
            NotFoundError: If no item has this ID.
        """
        item = self.repo.get_by_id(item_id)
        if not item:
            raise NotFoundError(self.model.display_name, item_id)
        return item

    def get_by_slug(self, slug: str) -> Any:
        """Fetch one active item by slug.

        Raises:
            NotFoundError: If no active item has this slug.
        """
        item = self.repo.get_by_slug(slug) if self.model.has_slug else None
        if not item or not item.is_active:
            raise NotFoundError(self.model.display_name, slug)
        return item

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def _next_sequence(self) -> int:
        sequences = [i.sequence for i in self.repo.list_all()]
        return max(sequences) + 1 if sequences else 0

    def create(self, payload: dict[str, Any]) -> Any:
        """Validate and store a new item.

        Raises:
            ValidationError: If the payload is invalid.
            ConflictError: If the slug is already taken.
        """
        request = validate_request(self.content_type.create_request, payload)
        data = request.model_dump(exclude_none=True)

        if self.model.has_slug:
            slug = data.get("slug") or slugify(data["title"])
            if not slug:
                raise ValidationError("slug: could not be derived from the title")
            data["slug"] = slug

        if self.model.order_field == "sequence":
            data["sequence"] = self._next_sequence()

        if data.get("is_published"):
            data["published_at"] = utc_now()

        item = self.model(**data)
        self.repo.create_item(item)

        logger.info(
            "Content created",
            content_type=self.content_type.name,
            item_id=item.id,
        )
        return item

    def update(self, item_id: str, payload: dict[str, Any]) -> Any:
        """Apply a partial update.

        Raises:
            NotFoundError: If the item does not exist.
            ValidationError: If the payload is invalid.
            ConflictError: If the new slug is already taken.
        """
        item = self.get_by_id(item_id)
        request = validate_request(self.content_type.update_request, payload)
        updates = request.model_dump(exclude_unset=True)

        previous_slug = getattr(item, "slug", None)

        for key, value in updates.items():
            if value is not None:
                setattr(item, key, value)

        if getattr(item, "is_published", False) and item.published_at is None:
            item.published_at = utc_now()

        self.repo.update_item(item, previous_slug=previous_slug)

        logger.info(
            "Content updated",
            content_type=self.content_type.name,
            item_id=item_id,
            fields=sorted(k for k, v in updates.items() if v is not None),
        )
        return item

    def delete(self, item_id: str) -> None:
        """Hard-delete an item and release its slug.

        Raises:
            NotFoundError: If the item does not exist.
        """
        if not self.repo.delete_item(item_id):
            raise NotFoundError(self.model.display_name, item_id)

        logger.info("Content deleted", content_type=self.content_type.name, item_id=item_id)


class BlogService(ContentService):
    """Blog posts: publishing, view counting and taxonomy."""

    def __init__(self, repository: ContentRepository | None = None):
        super().__init__("blog", repository)

    def get_published_by_slug(self, slug: str) -> BlogPost:
        """Fetch a published post by slug and count the view.

        Raises:
            NotFoundError: If no published post has this slug.
        """
        post = self.get_by_slug(slug)
        if not post.is_published:
            raise NotFoundError(self.model.display_name, slug)
        return self.repo.increment_views(post.id)

    def _published(self) -> list[BlogPost]:
        return [p for p in self.repo.list_all() if p.is_published and p.is_active]

    def categories(self) -> list[str]:
        return sorted({p.category for p in self._published()})

    def tags(self) -> list[str]:
        return sorted({tag for p in self._published() for tag in p.tags})


class ExperienceService(ContentService):
    """The single experience section document."""

    def __init__(self, repository: ContentRepository | None = None):
        super().__init__("experience", repository)

    def get_current(self) -> Experience | None:
        """The first active experience document, if any."""
        items = self.list().items
        return items[0] if items else None

    def save(self, payload: dict[str, Any]) -> tuple[Experience, bool]:
        """Update the document named by ``id`` in the payload, or create one.

        Returns:
            Tuple of (document, whether it was created).
        """
        item_id = payload.get("id")
        if item_id:
            fields = {k: v for k, v in payload.items() if k != "id"}
            return self.update(item_id, fields), False
        return self.create(payload), True


class SectionService(ContentService):
    """A page section held in a single document.

    Reads seed the section's default document when none exists, so the
    page always has content. Saves update the current document in place.
    """

    def __init__(
        self,
        content_type: str,
        defaults: dict[str, Any],
        repository: ContentRepository | None = None,
    ):
        super().__init__(content_type, repository)
        self.defaults = defaults

    def get_current(self) -> Any:
        """The most recently updated active document, if any."""
        items = self.list().items
        return items[0] if items else None

    def get_or_seed(self) -> Any:
        current = self.get_current()
        if current:
            return current
        logger.info("Seeding default section", content_type=self.content_type.name)
        return self.create(self.defaults)

    def save(self, payload: dict[str, Any]) -> tuple[Any, bool]:
        """Apply the payload to the current document, creating it if missing.

        Returns:
            Tuple of (document, whether it was created).
        """
        fields = {k: v for k, v in payload.items() if k not in ("id", "_id")}
        current = self.get_current()
        if current:
            return self.update(current.id, fields), False
        return self.create(fields), True


SECTION_DEFAULTS: dict[str, dict[str, Any]] = {
    "about-hero": DEFAULT_ABOUT_HERO,
    "our-story": DEFAULT_OUR_STORY,
    "hero-section": DEFAULT_HERO_SECTION,
}


def section_service(name: str, repository: ContentRepository | None = None) -> SectionService:
    """The service for a named page section.

    Raises:
        NotFoundError: If no section has this name.
    """
    if name not in SECTION_DEFAULTS:
        raise NotFoundError("Section", name)
    return SectionService(name, SECTION_DEFAULTS[name], repository)
