RTL_LANGS = ("ar", "he", "fa", "ur", "ps", "sd", "ug", "yi", "dv")


def detect_direction(lang: str | None) -> str:
    primary = (lang or "").strip().lower().replace("_", "-").split("-")[0]
    return "rtl" if primary in RTL_LANGS else "ltr"
