"""Pydantic models for Brighten entities."""

from brighten.models.base import BaseModel, CamelModel, RequestModel, TimestampMixin
from brighten.models.content import ContentEntity
from brighten.models.visitor import (
    Visitor,
    VisitorStatus,
    RawStorageData,
    PageVisit,
    ContactInfo,
    StorageReport,
    PageViewReport,
    UpdateVisitorRequest,
)
from brighten.models.service import Service, CreateServiceRequest, UpdateServiceRequest
from brighten.models.product import Product, CreateProductRequest, UpdateProductRequest
from brighten.models.portfolio import (
    PortfolioItem,
    PortfolioCategory,
    CreatePortfolioRequest,
    UpdatePortfolioRequest,
)
from brighten.models.blog_post import (
    BlogPost,
    Author,
    CreateBlogPostRequest,
    UpdateBlogPostRequest,
)
from brighten.models.team_member import (
    TeamMember,
    Department,
    CreateTeamMemberRequest,
    UpdateTeamMemberRequest,
)
from brighten.models.achievement import (
    Achievement,
    CreateAchievementRequest,
    UpdateAchievementRequest,
)
from brighten.models.company_value import (
    CompanyValue,
    CreateCompanyValueRequest,
    UpdateCompanyValueRequest,
)
from brighten.models.testimonial import (
    Testimonial,
    CreateTestimonialRequest,
    UpdateTestimonialRequest,
)
from brighten.models.gallery_image import (
    GalleryImage,
    CreateGalleryImageRequest,
    UpdateGalleryImageRequest,
)
from brighten.models.experience import (
    Experience,
    CreateExperienceRequest,
    UpdateExperienceRequest,
)
from brighten.models.about_hero import AboutHero, CreateAboutHeroRequest, UpdateAboutHeroRequest
from brighten.models.our_story import OurStory, CreateOurStoryRequest, UpdateOurStoryRequest
from brighten.models.hero_section import (
    HeroSection,
    SocialPlatform,
    CreateHeroSectionRequest,
    UpdateHeroSectionRequest,
)

__all__ = [
    "BaseModel",
    "CamelModel",
    "RequestModel",
    "TimestampMixin",
    "ContentEntity",
    "Visitor",
    "VisitorStatus",
    "RawStorageData",
    "PageVisit",
    "ContactInfo",
    "StorageReport",
    "PageViewReport",
    "UpdateVisitorRequest",
    "Service",
    "CreateServiceRequest",
    "UpdateServiceRequest",
    "Product",
    "CreateProductRequest",
    "UpdateProductRequest",
    "PortfolioItem",
    "PortfolioCategory",
    "CreatePortfolioRequest",
    "UpdatePortfolioRequest",
    "BlogPost",
    "Author",
    "CreateBlogPostRequest",
    "UpdateBlogPostRequest",
    "TeamMember",
    "Department",
    "CreateTeamMemberRequest",
    "UpdateTeamMemberRequest",
    "Achievement",
    "CreateAchievementRequest",
    "UpdateAchievementRequest",
    "CompanyValue",
    "CreateCompanyValueRequest",
    "UpdateCompanyValueRequest",
    "Testimonial",
    "CreateTestimonialRequest",
    "UpdateTestimonialRequest",
    "GalleryImage",
    "CreateGalleryImageRequest",
    "UpdateGalleryImageRequest",
    "Experience",
    "CreateExperienceRequest",
    "UpdateExperienceRequest",
    "AboutHero",
    "CreateAboutHeroRequest",
    "UpdateAboutHeroRequest",
    "OurStory",
    "CreateOurStoryRequest",
    "UpdateOurStoryRequest",
    "HeroSection",
    "SocialPlatform",
    "CreateHeroSectionRequest",
    "UpdateHeroSectionRequest",
]
