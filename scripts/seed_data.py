#!/usr/bin/env python3
"""Seed default site content into DynamoDB.

Each content type is only seeded when it has no items yet, so the script is
safe to re-run against a populated stage.
"""

import argparse
import os
import sys

# Add the shared layer to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src", "layers", "shared", "python"))

from brighten.repositories.content import ContentRepository
from brighten.services.content_service import ContentService, get_content_type

VALUES = [
    {
        "title": "Passion",
        "description": "We are passionate about creating exceptional digital experiences that transform businesses.",
        "icon": "heart",
        "color": "#F66526",
        "order": 0,
    },
    {
        "title": "Innovation",
        "description": "We constantly push boundaries and embrace new technologies to deliver cutting-edge solutions.",
        "icon": "lightbulb",
        "color": "#F2502C",
        "order": 1,
    },
    {
        "title": "Collaboration",
        "description": "We believe in the power of teamwork and partnership with our clients for mutual success.",
        "icon": "users",
        "color": "#F66526",
        "order": 2,
    },
    {
        "title": "Excellence",
        "description": "We strive for excellence in everything we do, from code quality to client communication.",
        "icon": "target",
        "color": "#F2502C",
        "order": 3,
    },
    {
        "title": "Integrity",
        "description": "We operate with honesty, transparency, and ethical practices in all our dealings.",
        "icon": "shield",
        "color": "#F66526",
        "order": 4,
    },
    {
        "title": "Agility",
        "description": "We adapt quickly to changing needs and technologies to stay ahead of the curve.",
        "icon": "zap",
        "color": "#F2502C",
        "order": 5,
    },
]

ACHIEVEMENTS = [
    {
        "title": "Digital Agency of the Year 2023",
        "organization": "Digital Excellence Foundation",
        "year": "2023",
        "image": "/gleaming-victory-cup.png",
        "icon": "trophy",
        "isFeatured": True,
        "order": 0,
    },
    {
        "title": "Innovation in Web Design",
        "organization": "Web Design Global Awards",
        "year": "2022",
        "image": "/abstract-web-award.png",
        "icon": "award",
        "order": 1,
    },
    {
        "title": "SEO & Digital Marketing Award",
        "organization": "Marketing Innovation Summit",
        "year": "2021",
        "image": "/golden-achievement.png",
        "icon": "certificate",
        "order": 2,
    },
]

SERVICES = [
    {
        "title": "Website Development",
        "description": "Custom websites built with cutting-edge technology for optimal performance and user experience.",
        "icon": "Code",
        "image": "/images/best-website-development-comay.jpg",
        "featuredProject": "BRIGHTEN SOLUTIONS PORTAL",
        "content": "<h2>Website Development Services</h2><p>Custom-built websites optimized for performance and user experience.</p>",
    },
    {
        "title": "App Development",
        "description": "Native and cross-platform mobile applications that deliver seamless experiences across all devices.",
        "icon": "Smartphone",
        "image": "/images/best-app-development-comapny.jpg",
        "featuredProject": "CUSTOMER LOYALTY APP",
        "content": "<h2>App Development Services</h2><p>Mobile applications for iOS and Android that engage users.</p>",
    },
    {
        "title": "Digital Marketing",
        "description": "Boosting visibility and conversions through expert strategy and data-driven campaigns.",
        "icon": "LineChart",
        "image": "/images/best-digital-marketing-services.jpg",
        "featuredProject": "STARTLOCK IMMOBILISERS",
        "content": "<h2>Digital Marketing Services</h2><p>SEO, PPC, social media, email and content marketing.</p>",
    },
    {
        "title": "UI/UX Design",
        "description": "Creating intuitive, engaging interfaces that delight users and drive business results.",
        "icon": "Palette",
        "image": "/images/best-UI-UX-Design.jpg",
        "featuredProject": "E-COMMERCE REDESIGN",
        "content": "<h2>UI/UX Design Services</h2><p>User research, wireframing, visual design and usability testing.</p>",
    },
]

SEED_DATA = {
    "values": VALUES,
    "achievements": ACHIEVEMENTS,
    "services": SERVICES,
}


def seed(table_name: str, content_type: str, payloads: list[dict]) -> int:
    """Create ``payloads`` unless the type already has items. Returns items created."""
    ct = get_content_type(content_type)
    service = ContentService(ct, repository=ContentRepository(ct.model, table_name=table_name))

    existing = service.list(include_inactive=True).total
    if existing:
        print(f"  {content_type}: {existing} already present, skipping")
        return 0

    for payload in payloads:
        service.create(payload)
    print(f"  {content_type}: created {len(payloads)}")
    return len(payloads)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Seed default site content")
    parser.add_argument("--stage", default="dev", help="Deployment stage")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    parser.add_argument(
        "--only",
        choices=sorted(SEED_DATA),
        action="append",
        help="Seed only this content type (repeatable)",
    )
    args = parser.parse_args()

    os.environ.setdefault("AWS_DEFAULT_REGION", args.region)
    table_name = f"brighten-{args.stage}"
    print(f"Seeding data to table: {table_name}")

    total = 0
    for content_type in args.only or sorted(SEED_DATA):
        total += seed(table_name, content_type, SEED_DATA[content_type])

    print(f"Done. {total} items created.")


if __name__ == "__main__":
    main()
