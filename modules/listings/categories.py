"""
Static service category catalogue.
"""

from typing import Optional
from pydantic import BaseModel


class Category(BaseModel):
    id: str
    name: str
    icon: str
    sub_categories: list[str]

    model_config = {"frozen": True}


CATEGORIES: list[Category] = [
    Category(
        id="graphic_design",
        name="Graphics & Design",
        icon="🎨",
        sub_categories=["Logo Design", "Brand Identity", "Web Design", "Brochures & Catalogs",
                        "Social Media", "Illustration", "NFT Art"],
    ),
    Category(
        id="software",
        name="Software & Technology",
        icon="</>",
        sub_categories=["Web Development", "Mobile Apps", "Desktop Software", "Game Development",
                        "Data Analysis", "Artificial Intelligence", "Cyber Security"],
    ),
    Category(
        id="writing",
        name="Writing & Translation",
        icon="📝",
        sub_categories=["Content Writing", "Translation", "Editing", "Scriptwriting",
                        "Blog Posts", "Copywriting", "Resumes & CVs"],
    ),
    Category(
        id="marketing",
        name="Digital Marketing",
        icon="📢",
        sub_categories=["SEO", "Social Media Management", "Google Ads", "Email Marketing",
                        "Influencer", "Content Strategy"],
    ),
    Category(
        id="video_animation",
        name="Video & Animation",
        icon="🎬",
        sub_categories=["Video Editing", "Promo Videos", "Logo Animation", "3D Animation",
                        "Subtitles & Dubbing"],
    ),
    Category(
        id="music_audio",
        name="Music & Audio",
        icon="🎵",
        sub_categories=["Voice Over", "Mixing & Mastering", "Sound Effects", "Songwriting", "Jingles"],
    ),
    Category(
        id="consulting",
        name="Consulting",
        icon="💡",
        sub_categories=["Business Plans", "Career Coaching", "Legal Consulting",
                        "Financial Consulting", "E-commerce Consulting"],
    ),
]

_BY_ID = {c.id: c for c in CATEGORIES}


def get_category(category_id: str) -> Optional[Category]:
    return _BY_ID.get(category_id)
