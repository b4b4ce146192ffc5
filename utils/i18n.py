"""UI string tables (English / Arabic)."""

TRANSLATIONS = {
    "en": {
        "app_title": "Eventcast",
        "app_subtitle": "Discover the perfect time for your outdoor plans",
        "nav_forecast": "Forecast",
        "nav_safety": "Safety Assistance",
        "language": "Language",
        "english": "English",
        "arabic": "العربية",
        "location_label": "Location",
        "location_placeholder": "Enter city or place",
        "location_error": "Please enter a location.",
        "date_label": "Date",
        "check_weather": "Check Weather",
        "pick_on_map": "Pick on map",
        "hide_map": "Hide map",
        "use_selected": "Use selected location",
        "selected_coords": "Selected coordinates",
        "location_not_found": "Location not found. Please try again.",
        "fetch_error": "An error occurred while fetching weather data. Please try again.",
        "weather_details": "Weather Details",
        "event_suitability": "Event Suitability",
        "suitable": "Suitable",
        "not_suitable": "Not Suitable",
        "considerations": "Considerations",
        "safety_alert_title": "Weather Safety Alert",
        "safety_alert_body": "For your safety, we recommend reviewing safety information and assistance options.",
        "view_safety": "View Safety Information",
        "dismiss": "Dismiss",
        "safety_title": "Safety Assistance",
        "weather_issue": "Weather condition",
        "other_issue": "Describe the condition",
        "assistance_type": "Assistance needed",
        "description": "Details",
        "urgent": "Urgent",
        "your_name": "Your name",
        "phone": "Phone number",
        "submit_request": "Request Help",
        "request_sent": "Your request has been sent. Help is on the way.",
        "emergency_numbers": "Emergency numbers",
        "your_location": "Your location",
        "map_hint": "Click the map to set your location.",
        "all_events": "All Events",
        "picnic": "Picnic",
        "sports": "Sports",
        "festival": "Festival",
        "wedding": "Wedding",
    },
    "ar": {
        "app_title": "Eventcast",
        "app_subtitle": "اكتشف الوقت المثالي لخططك الخارجية",
        "nav_forecast": "التوقعات",
        "nav_safety": "المساعدة والسلامة",
        "language": "اللغة",
        "english": "الإنجليزية",
        "arabic": "العربية",
        "location_label": "الموقع",
        "location_placeholder": "أدخل اسم المدينة أو المكان",
        "location_error": "الرجاء إدخال الموقع.",
        "date_label": "التاريخ",
        "check_weather": "تحقق من الطقس",
        "pick_on_map": "اختر من الخريطة",
        "hide_map": "إخفاء الخريطة",
        "use_selected": "استخدم الموقع المحدد",
        "selected_coords": "الإحداثيات المحددة",
        "location_not_found": "لم يتم العثور على الموقع. حاول مرة أخرى.",
        "fetch_error": "حدث خطأ أثناء جلب بيانات الطقس. حاول مرة أخرى.",
        "weather_details": "تفاصيل الطقس",
        "event_suitability": "ملاءمة الفعاليات",
        "suitable": "مناسب",
        "not_suitable": "غير مناسب",
        "considerations": "ملاحظات",
        "safety_alert_title": "تنبيه السلامة الجوية",
        "safety_alert_body": "حفاظًا على سلامتك، ننصح بمراجعة معلومات السلامة وخيارات المساعدة.",
        "view_safety": "عرض معلومات السلامة",
        "dismiss": "تجاهل",
        "safety_title": "المساعدة والسلامة",
        "weather_issue": "الحالة الجوية",
        "other_issue": "صف الحالة",
        "assistance_type": "نوع المساعدة",
        "description": "التفاصيل",
        "urgent": "عاجل",
        "your_name": "الاسم",
        "phone": "رقم الهاتف",
        "submit_request": "طلب المساعدة",
        "request_sent": "تم إرسال طلبك. المساعدة في الطريق.",
        "emergency_numbers": "أرقام الطوارئ",
        "your_location": "موقعك",
        "map_hint": "انقر على الخريطة لتحديد موقعك.",
        "all_events": "جميع الفعاليات",
        "picnic": "نزهة",
        "sports": "رياضة",
        "festival": "مهرجان",
        "wedding": "حفل زفاف",
    },
}


def t(key: str, lang: str = "en") -> str:
    """Translated string; falls back to English, then to the key itself."""
    table = TRANSLATIONS.get(lang) or TRANSLATIONS["en"]
    if key in table:
        return table[key]
    return TRANSLATIONS["en"].get(key, key)


def text_direction(lang: str) -> str:
    return "rtl" if lang == "ar" else "ltr"
