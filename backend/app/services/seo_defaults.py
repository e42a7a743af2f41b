"""
Bilingual (Bengali + English) meta defaults for the public pages.

Used when a page has no row in ``seo_pages``. Titles stay within 60
characters and descriptions within 160; no two pages share a description.
"""
from dataclasses import dataclass

DEFAULT_APP_NAME = "NOOR"


@dataclass(frozen=True)
class PageSeoDefaults:
    title: str
    description: str


DEFAULTS: dict[str, PageSeoDefaults] = {
    "/": PageSeoDefaults(
        title="NOOR — Islamic Learning & Prayer App",
        description="Complete Islamic learning platform — নামাজ, Quran, দোয়া এবং ইসলামিক জ্ঞান এক জায়গায়। Prayer times, Hadith ও আরও অনেক কিছু।",
    ),
    "/quran": PageSeoDefaults(
        title="Quran Reader — পবিত্র কুরআন পড়ুন",
        description="Read the Holy Quran with Arabic text & Bengali translation — সূরা তিলাওয়াত, অডিও ও তাফসীর সহ সম্পূর্ণ কুরআন পাঠ।",
    ),
    "/prayer-times": PageSeoDefaults(
        title="Prayer Times — নামাজের সময়সূচী",
        description="Accurate daily prayer times based on your location — আপনার এলাকার ফজর, যোহর, আসর, মাগরিব ও এশার সঠিক সময়।",
    ),
    "/dua": PageSeoDefaults(
        title="Islamic Duas — ইসলামিক দোয়া সমূহ",
        description="Curated collection of authentic Islamic duas — দৈনন্দিন দোয়া, মাসনূন দোয়া ও কুরআনের দোয়া বাংলা অর্থসহ।",
    ),
    "/quiz": PageSeoDefaults(
        title="Islamic Quiz — ইসলামিক কুইজ",
        description="Test your Islamic knowledge with daily quizzes — ইসলামিক জ্ঞান যাচাই করুন, স্কোর অর্জন করুন এবং শিখুন।",
    ),
    "/bukhari": PageSeoDefaults(
        title="Sahih Bukhari — সহীহ বুখারী হাদিস",
        description="Browse Sahih Bukhari Hadith collection — সহীহ বুখারী শরীফের হাদিস বাংলা অনুবাদ ও ব্যাখ্যা সহ পড়ুন।",
    ),
    "/prayer-guide": PageSeoDefaults(
        title="Prayer Guide — নামাজ শিক্ষা",
        description="Step-by-step Salah guide with illustrations — নামাজের নিয়ম, সূরা ও দোয়া সহ সম্পূর্ণ নামাজ শিক্ষা গাইড।",
    ),
    "/tasbih": PageSeoDefaults(
        title="Digital Tasbih — ডিজিটাল তাসবীহ",
        description="Digital Tasbih counter for dhikr & meditation — সুবহানাল্লাহ, আলহামদুলিল্লাহ ও আল্লাহু আকবার গণনা করুন।",
    ),
    "/qibla": PageSeoDefaults(
        title="Qibla Direction — কিবলার দিক",
        description="Find accurate Qibla direction from your location — আপনার অবস্থান থেকে কিবলার সঠিক দিক নির্ণয় করুন।",
    ),
    "/99-names": PageSeoDefaults(
        title="99 Names of Allah — আল্লাহর ৯৯ নাম",
        description="Learn the 99 beautiful names of Allah — আল্লাহ তাআলার ৯৯টি গুণবাচক নাম অর্থ ও ফযীলত সহ জানুন।",
    ),
    "/baby-names": PageSeoDefaults(
        title="Muslim Baby Names — মুসলিম শিশুর নাম",
        description="Beautiful Islamic baby names with meanings — ছেলে ও মেয়ে শিশুদের জন্য অর্থসহ সুন্দর ইসলামিক নাম।",
    ),
    "/names": PageSeoDefaults(
        title="Islamic Names — ইসলামিক নাম সমূহ",
        description="Browse Islamic names with Arabic script & meanings — আরবি উচ্চারণ ও বাংলা অর্থসহ ইসলামিক নাম খুঁজুন।",
    ),
    "/calendar": PageSeoDefaults(
        title="Islamic Calendar — ইসলামিক ক্যালেন্ডার",
        description="Hijri calendar with important Islamic dates — হিজরি তারিখ, রমজান, ঈদ ও অন্যান্য ইসলামিক দিবস দেখুন।",
    ),
    "/about": PageSeoDefaults(
        title="About NOOR — আমাদের সম্পর্কে",
        description="Learn about the NOOR Islamic app mission — ইসলামিক শিক্ষা ও প্রযুক্তি একত্রে আনার আমাদের লক্ষ্য ও উদ্দেশ্য।",
    ),
    "/contact": PageSeoDefaults(
        title="Contact Us — যোগাযোগ করুন",
        description="Get in touch with the NOOR team — প্রশ্ন, পরামর্শ বা সহযোগিতার জন্য আমাদের সাথে যোগাযোগ করুন।",
    ),
    "/privacy-policy": PageSeoDefaults(
        title="Privacy Policy — গোপনীয়তা নীতি",
        description="NOOR app privacy policy & data handling — আপনার তথ্যের নিরাপত্তা ও গোপনীয়তা সম্পর্কে বিস্তারিত জানুন।",
    ),
    "/terms": PageSeoDefaults(
        title="Terms of Service — সেবার শর্তাবলী",
        description="NOOR app terms & conditions of use — অ্যাপ ব্যবহারের শর্তাবলী ও নিয়মাবলী বিস্তারিত পড়ুন।",
    ),
    "/settings": PageSeoDefaults(
        title="Settings — সেটিংস",
        description="Customize your NOOR app experience — ভাষা, থিম, নোটিফিকেশন ও অন্যান্য পছন্দ অনুযায়ী সেটিংস করুন।",
    ),
    "/notifications": PageSeoDefaults(
        title="Notifications — নোটিফিকেশন",
        description="Manage prayer & quiz notifications — নামাজের সময় ও কুইজ রিমাইন্ডার নোটিফিকেশন সেটিংস পরিচালনা করুন।",
    ),
}


def get_page_seo_defaults(pathname: str, app_name: str | None = None) -> PageSeoDefaults | None:
    """
    Return the built-in meta for ``pathname``, or None for unknown routes.

    A configured ``app_name`` replaces the NOOR brand in title and description.
    """
    entry = DEFAULTS.get(pathname)
    if entry is None:
        return None

    if app_name and app_name.upper() != DEFAULT_APP_NAME:
        return PageSeoDefaults(
            title=entry.title.replace(DEFAULT_APP_NAME, app_name),
            description=entry.description.replace(DEFAULT_APP_NAME, app_name),
        )
    return entry
