"""
English / Arabic text tables and the key lookup used by every view.

Lookup order is: requested language, then English, then the key itself.
There is no interpolation; callers build compound keys by concatenation
(see ``confidence_key``).
"""

from enum import Enum


class Language(str, Enum):
    en = "en"
    ar = "ar"


RTL_LANGUAGES = {Language.ar}

TRANSLATIONS: dict[Language, dict[str, str]] = {
    Language.en: {
        # ── Header ────────────────────────────────────────────
        "appTitle": "ZOHO Sales Expert & Pitch Generator",
        "languageToggle": "العربية",

        # ── Input form ────────────────────────────────────────
        "inputSectionTitle": "Company Research",
        "websiteLabel": "Company Website URL",
        "websitePlaceholder": "https://example.com",
        "facebookLabel": "Facebook Profile/Page",
        "facebookPlaceholder": "CompanyName or profile URL",
        "instagramLabel": "Instagram Profile",
        "instagramPlaceholder": "@companyname",
        "linkedinLabel": "LinkedIn Company/Profile",
        "linkedinPlaceholder": "Company name or profile URL",
        "descriptionLabel": "Manual Company Description (optional)",
        "descriptionPlaceholder": "Provide company details if URLs are not available...",
        "generateButton": "Generate Pitch",
        "clearButton": "Clear All",
        "validationError": "Please provide at least one input (URL or description)",

        # ── Loading ───────────────────────────────────────────
        "loadingMessage": "Analyzing company data and generating customized pitch...",
        "loadingSubtext": "This may take 10-15 seconds",

        # ── Output sections ───────────────────────────────────
        "resultsGenerated": "Your Customized Pitch",
        "partATitle": "Industry Confirmation & Pain Points",
        "partBTitle": "Automation Opportunities",
        "partCTitle": "Customized Zoho Solutions",
        "partDTitle": "Quick Proposal",

        "detectedIndustry": "Detected Industry",
        "confidenceHigh": "High Confidence",
        "confidenceMedium": "Medium Confidence",
        "confidenceLow": "Low Confidence",
        "painPointsTitle": "Key Pain Points",

        "productivityGain": "Productivity Gain",
        "costSavings": "Cost Savings",

        "expandDetails": "Expand Details",
        "collapseDetails": "Collapse",
        "zohoApps": "Zoho Apps Involved",
        "implementation": "Implementation Steps",

        "proposalClosing": "This is a quick generic system creation based on general search. More specific and detailed solutions can be discussed with our expertise.",
        "downloadPDF": "Download PDF",
        "shareEmail": "Share via Email",
        "shareWhatsApp": "Share on WhatsApp",
        "copyToClipboard": "Copy to Clipboard",
        "copied": "Copied!",
        "exportError": "Failed to generate PDF. Please try again.",

        "salesTipTitle": "Sales Tip & Opening Angle",
        "deepDiveTitle": "Deep Dive Battle Cards",
        "researchSummaryTitle": "Company Research Summary",
        "presentationModeButton": "Presentation Mode",

        # ── Presentation mode ─────────────────────────────────
        "presentationSlide1": "Company Overview",
        "presentationSlide2": "Challenges & Pain Points",
        "presentationSlide3": "Zoho Solutions",
        "presentationSlide4": "The Power of Zoho One",
        "closePresentation": "Close Presentation",
        "nextSlide": "Next",
        "previousSlide": "Previous",

        # ── Feature suggestion ────────────────────────────────
        "featureSuggestionTitle": "💡 Suggest a Feature",
        "featurePlaceholder": "Have an idea to make this app better? Share your enhancement suggestions here...",
        "submitIdea": "Submit Idea",
        "featureSuccess": "✅ Thank you! Your idea has been submitted for review.",
        "featureError": "Failed to submit suggestion. Please try again.",
        "privacyNote": "Your suggestions help us improve. No personal data is collected.",

        # ── Errors ────────────────────────────────────────────
        "errorTitle": "Oops! Something went wrong",
        "errorRetry": "Retry",
        "errorFallback": "Failed to generate pitch. Please check your inputs and try again.",
        "networkError": "Network error. Please check your connection and try again.",

        # ── Deep dive ─────────────────────────────────────────
        "benefit": "Benefit",
        "feature": "Feature",
        "howToBuild": "How to Build This",

        # ── General ───────────────────────────────────────────
        "close": "Close",
        "save": "Save",
        "cancel": "Cancel",
        "loading": "Loading...",
        "noData": "No data available",
    },
    Language.ar: {
        "appTitle": "خبير مبيعات ZOHO ومولد العروض",
        "languageToggle": "English",

        "inputSectionTitle": "بحث الشركة",
        "websiteLabel": "رابط موقع الشركة",
        "websitePlaceholder": "https://example.com",
        "facebookLabel": "صفحة/حساب فيسبوك",
        "facebookPlaceholder": "اسم الشركة أو رابط الصفحة",
        "instagramLabel": "حساب إنستغرام",
        "instagramPlaceholder": "@اسم_الشركة",
        "linkedinLabel": "حساب/صفحة لينكد إن",
        "linkedinPlaceholder": "اسم الشركة أو رابط الحساب",
        "descriptionLabel": "وصف يدوي للشركة (اختياري)",
        "descriptionPlaceholder": "قدم تفاصيل الشركة إذا لم تكن الروابط متاحة...",
        "generateButton": "إنشاء العرض",
        "clearButton": "مسح الكل",
        "validationError": "يرجى تقديم مدخل واحد على الأقل (رابط أو وصف)",

        "loadingMessage": "جاري تحليل بيانات الشركة وإنشاء عرض مخصص...",
        "loadingSubtext": "قد يستغرق هذا 10-15 ثانية",

        "resultsGenerated": "عرضك المخصص",
        "partATitle": "تأكيد الصناعة ونقاط الألم",
        "partBTitle": "فرص الأتمتة",
        "partCTitle": "حلول Zoho المخصصة",
        "partDTitle": "عرض سريع",

        "detectedIndustry": "الصناعة المكتشفة",
        "confidenceHigh": "ثقة عالية",
        "confidenceMedium": "ثقة متوسطة",
        "confidenceLow": "ثقة منخفضة",
        "painPointsTitle": "نقاط الألم الرئيسية",

        "productivityGain": "زيادة الإنتاجية",
        "costSavings": "توفير التكاليف",

        "expandDetails": "توسيع التفاصيل",
        "collapseDetails": "طي",
        "zohoApps": "تطبيقات Zoho المستخدمة",
        "implementation": "خطوات التنفيذ",

        "proposalClosing": "هذا إنشاء نظام عام سريع بناءً على البحث العام. يمكن مناقشة حلول أكثر تحديدًا وتفصيلاً مع خبرائنا.",
        "downloadPDF": "تحميل PDF",
        "shareEmail": "مشاركة عبر البريد الإلكتروني",
        "shareWhatsApp": "مشاركة على واتساب",
        "copyToClipboard": "نسخ إلى الحافظة",
        "copied": "تم النسخ!",
        "exportError": "فشل إنشاء ملف PDF. يرجى المحاولة مرة أخرى.",

        "salesTipTitle": "نصيحة مبيعات وزاوية افتتاحية",
        "deepDiveTitle": "بطاقات معركة التعمق",
        "researchSummaryTitle": "ملخص بحث الشركة",
        "presentationModeButton": "وضع العرض التقديمي",

        "presentationSlide1": "نظرة عامة على الشركة",
        "presentationSlide2": "التحديات ونقاط الألم",
        "presentationSlide3": "حلول Zoho",
        "presentationSlide4": "قوة Zoho One",
        "closePresentation": "إغلاق العرض التقديمي",
        "nextSlide": "التالي",
        "previousSlide": "السابق",

        "featureSuggestionTitle": "💡 اقترح ميزة",
        "featurePlaceholder": "هل لديك فكرة لجعل هذا التطبيق أفضل؟ شارك مقترحات التحسين هنا...",
        "submitIdea": "إرسال الفكرة",
        "featureSuccess": "✅ شكراً لك! تم إرسال فكرتك للمراجعة.",
        "featureError": "فشل إرسال الاقتراح. يرجى المحاولة مرة أخرى.",
        "privacyNote": "اقتراحاتك تساعدنا على التحسين. لا يتم جمع أي بيانات شخصية.",

        "errorTitle": "عذراً! حدث خطأ ما",
        "errorRetry": "إعادة المحاولة",
        "errorFallback": "فشل إنشاء العرض. يرجى التحقق من المدخلات والمحاولة مرة أخرى.",
        "networkError": "خطأ في الشبكة. يرجى التحقق من الاتصال والمحاولة مرة أخرى.",

        "benefit": "الفائدة",
        "feature": "الميزة",
        "howToBuild": "كيفية البناء",

        "close": "إغلاق",
        "save": "حفظ",
        "cancel": "إلغاء",
        "loading": "جاري التحميل...",
        "noData": "لا توجد بيانات متاحة",
    },
}


def t(key: str, language: Language | str = Language.en) -> str:
    """Resolve *key* for *language*, falling back to English, then to the key."""
    table = TRANSLATIONS.get(parse_language(language), {})
    return table.get(key) or TRANSLATIONS[Language.en].get(key) or key


def confidence_key(level: str) -> str:
    """``"high"`` -> ``"confidenceHigh"``. Only the first letter is touched."""
    return "confidence" + level[:1].upper() + level[1:]


def text_direction(language: Language | str) -> str:
    return "rtl" if parse_language(language) in RTL_LANGUAGES else "ltr"


def toggle(language: Language | str) -> Language:
    return Language.ar if parse_language(language) == Language.en else Language.en


def parse_language(value: Language | str | None, default: Language | None = None) -> Language | None:
    """Coerce a stored preference; unknown values give *default*."""
    if isinstance(value, Language):
        return value
    try:
        return Language(value)
    except ValueError:
        return default
