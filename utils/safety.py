"""
Safety assistance content: per-issue guidance, emergency contacts and help requests.

Guidance is kept in English and Arabic; unknown issues and languages fall back
to the general advice in English.
"""
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

OTHER_ISSUE = "other"

ISSUE_LABELS = {
    "en": {
        "thunderstorm": "Thunderstorm / Lightning",
        "extreme_heat": "Extreme Heat",
        "heavy_rain": "Heavy Rain / Flooding",
        "strong_wind": "Strong Wind",
        "extreme_cold": "Extreme Cold",
        "sandstorm": "Sandstorm",
        "fog": "Dense Fog",
        OTHER_ISSUE: "Other",
    },
    "ar": {
        "thunderstorm": "عاصفة رعدية / برق",
        "extreme_heat": "حرارة شديدة",
        "heavy_rain": "أمطار غزيرة / فيضانات",
        "strong_wind": "رياح قوية",
        "extreme_cold": "برد شديد",
        "sandstorm": "عاصفة رملية",
        "fog": "ضباب كثيف",
        OTHER_ISSUE: "أخرى",
    },
}

ASSISTANCE_LABELS = {
    "en": {
        "information": "Safety information",
        "shelter": "Shelter",
        "medical": "Medical help",
        "evacuation": "Evacuation",
    },
    "ar": {
        "information": "معلومات السلامة",
        "shelter": "مأوى",
        "medical": "مساعدة طبية",
        "evacuation": "إخلاء",
    },
}

SAFETY_GUIDANCE = {
    "heavy_rain": {
        "icon": "🌧️",
        "en": {
            "title": "Heavy rain and flooding tips",
            "recommendations": [
                "Move to higher ground if you are in a flood-prone area.",
                "Avoid walking or driving through flood water.",
                "Stay away from fallen power lines.",
                "Keep an emergency bag with food, water and medication.",
                "Make sure the drains around your home are clear.",
                "Do not try to cross flooded bridges.",
            ],
        },
        "ar": {
            "title": "نصائح للأمطار الغزيرة والفيضانات",
            "recommendations": [
                "الانتقال إلى أرض مرتفعة إذا كنت في منطقة معرضة للفيضانات.",
                "تجنب السير أو القيادة في مياه الفيضانات.",
                "ابتعد عن خطوط الكهرباء المتساقطة.",
                "احتفظ بحقيبة طوارئ تحتوي على طعام وماء وأدوية.",
                "تأكد من نظافة مجاري المياه حول منزلك.",
                "لا تحاول عبور الجسور المغمورة بالمياه.",
            ],
        },
    },
    "thunderstorm": {
        "icon": "⚡",
        "en": {
            "title": "Thunderstorm and lightning tips",
            "recommendations": [
                "Stay indoors and away from windows.",
                "Avoid using electrical appliances and plumbing.",
                "If you are outside, find a low area away from trees and metal objects.",
                "Wait at least 30 minutes after the last thunder before going out.",
                "Unplug sensitive electrical devices.",
                "Do not use a landline phone during the storm.",
            ],
        },
        "ar": {
            "title": "نصائح للعواصف الرعدية والبرق",
            "recommendations": [
                "ابقَ في الداخل وابتعد عن النوافذ.",
                "تجنب استخدام الأجهزة الكهربائية والسباكة.",
                "إذا كنت بالخارج، ابحث عن منطقة منخفضة بعيدًا عن الأشجار والأجسام المعدنية.",
                "انتظر 30 دقيقة على الأقل بعد آخر رعدة قبل الخروج.",
                "افصل الأجهزة الكهربائية الحساسة.",
                "لا تستخدم الهاتف الأرضي أثناء العاصفة.",
            ],
        },
    },
    "extreme_heat": {
        "icon": "🥵",
        "en": {
            "title": "Extreme heat tips",
            "recommendations": [
                "Stay in air-conditioned places as much as possible.",
                "Drink plenty of water and avoid caffeine or alcohol.",
                "Wear light, loose, light-coloured clothing.",
                "Check on the elderly, children and pets.",
                "Avoid direct sun exposure during peak hours.",
                "Use sunscreen when going outside.",
            ],
        },
        "ar": {
            "title": "نصائح لموجات الحر الشديدة",
            "recommendations": [
                "ابقَ في الأماكن المكيفة قدر الإمكان.",
                "اشرب الكثير من الماء وتجنب المشروبات التي تحتوي على الكافيين أو الكحول.",
                "ارتدِ ملابس خفيفة وفضفاضة وذات ألوان فاتحة.",
                "افحص على كبار السن والأطفال والحيوانات الأليفة.",
                "تجنب التعرض المباشر لأشعة الشمس في ساعات الذروة.",
                "استخدم واقي الشمس عند الخروج.",
            ],
        },
    },
    "extreme_cold": {
        "icon": "🥶",
        "en": {
            "title": "Extreme cold tips",
            "recommendations": [
                "Wear several layers of warm clothing.",
                "Make sure your home is properly heated.",
                "Check on neighbours and the elderly.",
                "Keep pipes warm to stop them freezing.",
                "Avoid going out unless absolutely necessary.",
                "Cover your head, ears and hands when going outside.",
            ],
        },
        "ar": {
            "title": "نصائح لموجات البرد الشديد",
            "recommendations": [
                "ارتدي طبقات متعددة من الملابس الدافئة.",
                "تأكد من تدفئة المنزل بشكل جيد.",
                "افحص على الجيران وكبار السن.",
                "احرص على تدفئة الأنابيب لمنع تجمدها.",
                "تجنب الخروج إلا للضرورة القصوى.",
                "احرص على تغطية الرأس والأذنين واليدين عند الخروج.",
            ],
        },
    },
    "strong_wind": {
        "icon": "💨",
        "en": {
            "title": "Strong wind and storm tips",
            "recommendations": [
                "Stay indoors and away from windows and outer doors.",
                "Secure outdoor objects that the wind could carry away.",
                "Watch out for flying debris.",
                "If driving, watch for falling branches and power lines.",
                "Avoid standing under trees or tall buildings.",
                "Close windows and outer doors tightly.",
            ],
        },
        "ar": {
            "title": "نصائح للرياح القوية والعواصف",
            "recommendations": [
                "ابقَ في الداخل وابتعد عن النوافذ والأبواب الخارجية.",
                "أحكم تثبيت الأشياء الخارجية التي قد تطير بفعل الرياح.",
                "كن حذرًا من الحطام المتطاير.",
                "إذا كنت تقود، كن حذرًا من الأغصان المتساقطة وخطوط الكهرباء.",
                "تجنب الوقوف تحت الأشجار أو المباني العالية.",
                "أغلق النوافذ والأبواب الخارجية بإحكام.",
            ],
        },
    },
    "sandstorm": {
        "icon": "🌪️",
        "en": {
            "title": "Sandstorm tips",
            "recommendations": [
                "Close windows and doors tightly.",
                "Use a mask or damp cloth to protect your nose and mouth.",
                "If you are outside, find shelter immediately.",
                "Avoid driving during the sandstorm.",
                "Protect your eyes with goggles.",
                "Wash your face and hands well after the storm ends.",
            ],
        },
        "ar": {
            "title": "نصائح للعواصف الرملية",
            "recommendations": [
                "اغلق النوافذ والأبواب بإحكام.",
                "استخدم الكمامات أو مناديل مبللة لحماية أنفك وفمك.",
                "إذا كنت بالخارج، ابحث عن مأوى فورًا.",
                "تجنب القيادة أثناء العاصفة الرملية.",
                "احمِ عينيك بالنظارات الواقية.",
                "اغسل وجهك ويديك جيدًا بعد انتهاء العاصفة.",
            ],
        },
    },
    "fog": {
        "icon": "🌫️",
        "en": {
            "title": "Dense fog tips",
            "recommendations": [
                "Slow down and use low-beam headlights when driving.",
                "Keep a larger safety distance from the car in front.",
                "Use hazard lights if you stop at the roadside.",
                "Avoid sudden lane changes.",
                "If the fog is very dense, find a safe place and wait for it to clear.",
                "Listen for road and traffic updates.",
            ],
        },
        "ar": {
            "title": "نصائح للضباب الكثيف",
            "recommendations": [
                "خفف السرعة واستخدم الأضواء المنخفضة أثناء القيادة.",
                "حافظ على مسافة أمان أكبر بينك وبين السيارة التي أمامك.",
                "استخدم إشارات الطوارئ إذا توقفت على جانب الطريق.",
                "تجنب تغيير المسارات بشكل مفاجئ.",
                "إذا كان الضباب كثيفًا جدًا، ابحث عن مكان آمن وانتظر حتى يتحسن الطقس.",
                "استمع إلى تحديثات الطرق والمرور.",
            ],
        },
    },
}

GENERAL_GUIDANCE = {
    "icon": "ℹ️",
    "en": {
        "title": "General safety tips",
        "recommendations": [
            "Follow local weather updates and official warnings.",
            "Follow the instructions of civil defense and the authorities.",
            "Keep an emergency bag with the essentials.",
            "Know the evacuation routes in your area.",
            "Keep emergency numbers close at hand.",
            "Plan ahead how to reach your family in an emergency.",
        ],
    },
    "ar": {
        "title": "نصائح أمان عامة",
        "recommendations": [
            "تابع تحديثات الطقس المحلية والتحذيرات الرسمية.",
            "اتبع تعليمات الدفاع المدني والجهات المختصة.",
            "احرص على وجود حقيبة طوارئ تحتوي على مستلزمات أساسية.",
            "تأكد من معرفة طرق الإخلاء في منطقتك.",
            "احتفظ بأرقام الطوارئ في متناول اليد.",
            "خطط مسبقًا لكيفية التواصل مع عائلتك في حالات الطوارئ.",
        ],
    },
}

EMERGENCY_CONTACTS = (
    {"number": "911", "icon": "📞", "en": "Emergency", "ar": "الطوارئ"},
    {"number": "997", "icon": "🚑", "en": "Ambulance", "ar": "الإسعاف"},
    {"number": "998", "icon": "🧯", "en": "Civil Defense", "ar": "الدفاع المدني"},
    {"number": "999", "icon": "🛡️", "en": "Police", "ar": "الشرطة"},
)

# issue -> alert box style
ALERT_STYLES = {
    "thunderstorm": "danger",
    "extreme_heat": "warning",
    "heavy_rain": "info",
    "strong_wind": "warning",
}

_PLACE_TEXT = {
    "en": {
        "cooling": "Cooling centers",
        "shelters": "Nearby shelters",
        "relief": "Local relief center",
        "mall": "Air-conditioned mall",
        "emergency_shelter": "Emergency shelter",
        "away": "{km} km away",
    },
    "ar": {
        "cooling": "مراكز التبريد",
        "shelters": "الملاجئ القريبة",
        "relief": "مركز الإغاثة المحلي",
        "mall": "مركز تسوق مكيف",
        "emergency_shelter": "مأوى الطوارئ",
        "away": "على بعد {km} كم",
    },
}

_FORM_ERRORS = {
    "en": {
        "missing_issue": "Please select the type of weather condition.",
        "missing_other": "Please describe the weather condition.",
    },
    "ar": {
        "missing_issue": "الرجاء تحديد نوع الحالة الجوية",
        "missing_other": "الرجاء تحديد الحالة الجوية",
    },
}


class HelpRequestError(ValueError):
    """Help request failed validation; the message is ready for display."""


def _lang(lang: str) -> str:
    return lang if lang in ("en", "ar") else "en"


def guidance_for(issue: Optional[str], lang: str = "en") -> dict:
    """Icon, title and recommendations for an issue (general advice if unknown)."""
    entry = SAFETY_GUIDANCE.get(issue or "", GENERAL_GUIDANCE)
    text = entry[_lang(lang)]
    return {
        "icon": entry["icon"],
        "title": text["title"],
        "recommendations": list(text["recommendations"]),
    }


def alert_style(issue: Optional[str]) -> str:
    return ALERT_STYLES.get(issue or "", "warning")


def nearby_place_type(issue: Optional[str], lang: str = "en") -> Optional[str]:
    """Heading for the nearby-places list, or None when it does not apply."""
    text = _PLACE_TEXT[_lang(lang)]
    if issue == "extreme_heat":
        return text["cooling"]
    if issue in ("heavy_rain", "thunderstorm"):
        return text["shelters"]
    return None


def nearby_places(issue: Optional[str], lang: str = "en") -> List[Dict[str, str]]:
    """Placeholder nearby places; there is no places provider behind this yet."""
    if nearby_place_type(issue, lang) is None:
        return []
    text = _PLACE_TEXT[_lang(lang)]
    second = text["mall"] if issue == "extreme_heat" else text["emergency_shelter"]
    return [
        {"name": text["relief"], "distance": text["away"].format(km="1.2")},
        {"name": second, "distance": text["away"].format(km="2.3")},
    ]


def issue_detected_message(issue_label: str, lang: str = "en") -> str:
    if _lang(lang) == "ar":
        return f"تم الكشف عن: {issue_label} في منطقتك. يرجى اتخاذ الاحتياطات اللازمة."
    return f"Detected: {issue_label} in your area. Please take the necessary precautions."


def build_help_request(
    issue: str,
    location: dict,
    assistance_type: str,
    other_issue: str = "",
    details: str = "",
    urgent: bool = False,
    user_name: str = "",
    phone: str = "",
    lang: str = "en",
) -> dict:
    """Validate the safety form and assemble the help request payload.

    location: {"lat": float, "lng": float, "name": str}
    Raises HelpRequestError with a display-ready message.
    """
    errors = _FORM_ERRORS[_lang(lang)]
    if not issue:
        raise HelpRequestError(errors["missing_issue"])
    if issue == OTHER_ISSUE and not (other_issue or "").strip():
        raise HelpRequestError(errors["missing_other"])

    labels = ISSUE_LABELS[_lang(lang)]
    assistance_labels = ASSISTANCE_LABELS[_lang(lang)]
    return {
        "user": {"name": user_name, "phone": phone},
        "location": {
            "lat": location.get("lat"),
            "lng": location.get("lng"),
            "name": location.get("name") or ("موقع غير معروف" if _lang(lang) == "ar" else "Unknown location"),
        },
        "issue": {
            "type": issue,
            "description": other_issue.strip() if issue == OTHER_ISSUE else labels.get(issue, issue),
        },
        "assistance": {
            "type": assistance_type,
            "description": assistance_labels.get(assistance_type, assistance_type),
        },
        "details": details,
        "isUrgent": bool(urgent),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": "new",
    }


def submit_help_request(request: dict) -> dict:
    """Record the help request. Delivery to a dispatch backend is simulated by logging."""
    logger.info("Help request submitted: %s", request)
    if request.get("isUrgent"):
        notify_emergency_services(request)
    return {**request, "status": "submitted"}


def notify_emergency_services(request: dict) -> None:
    logger.warning(
        "Urgent help request (%s) at %s,%s",
        request["issue"]["type"],
        request["location"].get("lat"),
        request["location"].get("lng"),
    )
