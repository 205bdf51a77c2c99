"""
Database bootstrap for first start.
It creates the tables, ensures the default admin account exists, and seeds editable page copy.
Every step is idempotent so the bootstrap can run on each application start.
"""

from __future__ import annotations

import logging
from typing import Final

import sqlalchemy as sa
from sqlalchemy.engine import Engine

from union_cms.common.db_schema import admins, metadata, page_content
from union_cms.common.security import hash_password

logger = logging.getLogger(__name__)

# (page_name, section_id, section_title, content, content_type, display_order)
DEFAULT_PAGE_SECTIONS: Final[tuple[tuple[str, str, str, str, str, int], ...]] = (
    ("home", "hero_title", "Hero Title", "اتحاد الطلبة الموريتانيين بالجزائر", "text", 1),
    ("home", "hero_subtitle", "Hero Subtitle", "معاً نحو التميز والنجاح في مسيرتنا الأكاديمية", "text", 2),
    ("home", "stats_students", "Stats - Students", "500+", "text", 3),
    ("home", "stats_states", "Stats - States", "15+", "text", 4),
    ("home", "stats_majors", "Stats - Majors", "30+", "text", 5),
    ("home", "stats_years", "Stats - Years", "10+", "text", 6),
    (
        "home",
        "about_preview_vision",
        "Vision",
        "أن نكون الجسر الذي يربط الطلبة الموريتانيين بفرص النجاح والتميز في الجزائر",
        "text",
        7,
    ),
    (
        "home",
        "about_preview_mission",
        "Mission",
        "توفير الدعم الشامل للطلبة وتسهيل اندماجهم في الحياة الأكاديمية والاجتماعية",
        "text",
        8,
    ),
    (
        "home",
        "about_preview_values",
        "Values",
        "نؤمن بالتضامن، التميز، الشفافية والعمل الجماعي كقيم أساسية",
        "text",
        9,
    ),
    ("home", "cta_title", "CTA Title", "انضم إلى عائلة اتحاد الطلبة", "text", 10),
    (
        "home",
        "cta_text",
        "CTA Text",
        "سجل الآن واستفد من خدماتنا المتنوعة ودعمنا المستمر طوال مسيرتك الأكاديمية",
        "text",
        11,
    ),
    ("about", "history_title", "History Title", "تاريخ الاتحاد", "text", 1),
    (
        "about",
        "history_content",
        "History Content",
        "تأسس اتحاد الطلبة الموريتانيين بالجزائر لخدمة الطلبة الموريتانيين الدارسين في الجزائر، "
        "ويسعى منذ تأسيسه إلى توفير بيئة داعمة تساعد الطلبة على التفوق الأكاديمي والاندماج في المجتمع الجزائري.",
        "html",
        2,
    ),
    ("about", "vision_title", "Vision Title", "رؤيتنا", "text", 3),
    (
        "about",
        "vision_content",
        "Vision Content",
        "أن نكون المرجع الأول والأفضل للطلبة الموريتانيين في الجزائر، "
        "ونساهم في بناء جيل متميز من الكفاءات الوطنية.",
        "html",
        4,
    ),
    ("about", "mission_title", "Mission Title", "مهمتنا", "text", 5),
    (
        "about",
        "mission_content",
        "Mission Content",
        "تقديم الدعم الشامل للطلبة الموريتانيين في جميع المجالات الأكاديمية والإدارية والاجتماعية.",
        "html",
        6,
    ),
    ("guide", "intro_title", "Guide Intro", "دليل الطالب الشامل", "text", 1),
    ("guide", "intro_text", "Guide Intro Text", "كل ما تحتاج معرفته للحياة والدراسة في الجزائر", "text", 2),
    ("guide", "bank_title", "Bank Section Title", "فتح حساب بنكي", "text", 3),
    (
        "guide",
        "bank_content",
        "Bank Section Content",
        "الوثائق المطلوبة: جواز السفر، شهادة التسجيل، شهادة الإقامة، صورتان شمسيتان.",
        "html",
        4,
    ),
    ("programs", "intro_title", "Programs Intro", "التخصصات الجامعية", "text", 1),
    (
        "programs",
        "intro_text",
        "Programs Intro Text",
        "استكشف التخصصات المتاحة للطلبة الموريتانيين في الجامعات الجزائرية",
        "text",
        2,
    ),
    ("services", "intro_title", "Services Intro", "خدمات الاتحاد", "text", 1),
    (
        "services",
        "intro_text",
        "Services Intro Text",
        "نقدم مجموعة متنوعة من الخدمات لدعم الطلبة في جميع جوانب حياتهم الأكاديمية",
        "text",
        2,
    ),
    ("contact", "intro_title", "Contact Intro", "تواصل معنا", "text", 1),
    (
        "contact",
        "intro_text",
        "Contact Intro Text",
        "نحن هنا لمساعدتك. لا تتردد في التواصل معنا لأي استفسار",
        "text",
        2,
    ),
    ("contact", "email", "Email", "contact@union-mauritanie.dz", "text", 3),
    ("contact", "phone", "Phone", "+213 XX XX XX XX", "text", 4),
    ("contact", "address", "Address", "الجزائر العاصمة، الجزائر", "text", 5),
)


def ensure_default_admin(engine: Engine, *, username: str, password: str) -> bool:
    """Create the default admin account if absent. Returns True when a row was inserted."""

    with engine.begin() as connection:
        existing = connection.execute(
            sa.select(admins.c.id).where(admins.c.username == username)
        ).first()
        if existing is not None:
            return False
        connection.execute(
            admins.insert().values(username=username, password=hash_password(password))
        )

    logger.warning(
        "Default admin %r created; change its password after the first login.", username
    )
    return True


def seed_default_page_content(engine: Engine) -> int:
    """Insert the default page sections when the page content table is empty."""

    with engine.begin() as connection:
        has_rows = connection.execute(sa.select(page_content.c.id).limit(1)).first()
        if has_rows is not None:
            return 0
        connection.execute(
            page_content.insert(),
            [
                {
                    "page_name": page,
                    "section_id": section,
                    "section_title": title,
                    "content": content,
                    "content_type": content_type,
                    "display_order": order,
                }
                for page, section, title, content, content_type, order in DEFAULT_PAGE_SECTIONS
            ],
        )

    logger.info("Seeded %d default page sections", len(DEFAULT_PAGE_SECTIONS))
    return len(DEFAULT_PAGE_SECTIONS)


def initialize_database(
    engine: Engine,
    *,
    default_admin_username: str,
    default_admin_password: str,
    seed_default_content: bool = True,
) -> None:
    """Create all tables and default rows."""

    metadata.create_all(engine)
    ensure_default_admin(
        engine,
        username=default_admin_username,
        password=default_admin_password,
    )
    if seed_default_content:
        seed_default_page_content(engine)
