"""
Insert sample news articles into the configured database.
Run it directly with `python scripts/seed_news.py`; pass `--dry-run` to list the articles only.
The database is bootstrapped first, so the script also works against an empty database.
"""

# ruff: noqa: E402

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from union_cms.api.api_config import get_api_config
from union_cms.api.db_access import DatabaseClient
from union_cms.api.services.news_service import NewsService
from union_cms.common.bootstrap import initialize_database
from union_cms.common.logging import configure_logging

SAMPLE_NEWS: tuple[dict[str, str | None], ...] = (
    {
        "title": "افتتاح التسجيلات للعام الجامعي 2024-2025",
        "content": (
            "يسر اتحاد الطلبة الموريتانيين بالجزائر أن يعلن عن افتتاح التسجيلات للعام الجامعي "
            "الجديد 2024-2025. يمكن للطلبة الجدد التسجيل عبر منصة PROGRES الإلكترونية. "
            "الموعد النهائي للتسجيل هو 30 سبتمبر 2024. للمزيد من المعلومات، يرجى التواصل مع الاتحاد."
        ),
        "category": "announcement",
        "location": "الجزائر العاصمة",
    },
    {
        "title": "لقاء تعارفي للطلبة الجدد",
        "content": (
            "ينظم اتحاد الطلبة الموريتانيين لقاءً تعارفياً للطلبة الجدد يوم السبت القادم. "
            "سيتضمن اللقاء جلسة توجيهية حول الحياة الجامعية في الجزائر، ونصائح للتأقلم مع البيئة "
            "الجديدة. سيكون هناك أيضاً فرصة للتعرف على الطلبة القدامى والاستفادة من تجاربهم."
        ),
        "category": "event",
        "location": "قاعة المحاضرات - جامعة الجزائر",
    },
    {
        "title": "نجاح باهر للطلبة الموريتانيين في الامتحانات",
        "content": (
            "نثمن ونهنئ جميع الطلبة الموريتانيين الذين حققوا نتائج متميزة في امتحانات الفصل الأول. "
            "حقق طلبتنا معدلات نجاح عالية في مختلف التخصصات، وخاصة في كليات الطب والهندسة والعلوم. "
            "نتمنى لهم المزيد من التفوق والنجاح."
        ),
        "category": "news",
        "location": None,
    },
    {
        "title": "ورشة عمل: كيفية كتابة السيرة الذاتية",
        "content": (
            "ينظم الاتحاد ورشة عمل حول كتابة السيرة الذاتية والتحضير لمقابلات العمل. ستقدم الورشة "
            "نصائح عملية لإعداد سيرة ذاتية احترافية، وكيفية التميز في سوق العمل. "
            "الورشة مفتوحة لجميع الأعضاء."
        ),
        "category": "event",
        "location": "مقر الاتحاد",
    },
    {
        "title": "تحديث: إجراءات تجديد الإقامة",
        "content": (
            "نود إبلاغ الطلبة بالإجراءات الجديدة لتجديد الإقامة. يجب تقديم الطلب قبل شهر من انتهاء "
            "صلاحية الإقامة الحالية. الوثائق المطلوبة: جواز السفر، شهادة التسجيل، إيصال الإقامة "
            "الجامعية، وصورتان شمسيتان. للمساعدة، تواصلوا مع مكتب الاتحاد."
        ),
        "category": "announcement",
        "location": None,
    },
    {
        "title": "احتفالية عيد الاستقلال الموريتاني",
        "content": (
            "بمناسبة الذكرى السنوية لاستقلال موريتانيا، ينظم الاتحاد احتفالية خاصة تتضمن فقرات "
            "ثقافية وفنية متنوعة. ندعو جميع أبناء الجالية للمشاركة في هذه المناسبة الوطنية الغالية. "
            "سيكون هناك عشاء جماعي بعد الاحتفال."
        ),
        "category": "event",
        "location": "قاعة الاحتفالات الكبرى",
    },
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Insert sample news articles")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the sample articles without writing them",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    if args.dry_run:
        titles = [article["title"] for article in SAMPLE_NEWS]
        print(json.dumps({"articles": titles, "dry_run": True}, ensure_ascii=False, indent=2))
        return

    configure_logging()
    config = get_api_config()
    db = DatabaseClient(database_url=config.database_url)
    initialize_database(
        db.engine,
        default_admin_username=config.default_admin_username,
        default_admin_password=config.default_admin_password,
        seed_default_content=config.seed_default_content,
    )

    service = NewsService(db=db)
    created_ids = [
        service.create(
            title=article["title"],
            content=article["content"],
            category=article["category"],
            image_url=None,
            location=article["location"],
            published=True,
        )["id"]
        for article in SAMPLE_NEWS
    ]
    db.dispose()
    print(json.dumps({"articles_added": len(created_ids), "ids": created_ids}, indent=2))


if __name__ == "__main__":
    main()
