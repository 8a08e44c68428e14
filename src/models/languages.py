from models.settings_models import LanguageOption

# korean_(south_korea) is the slot the community Russian pack is shipped in
LANGUAGE_OPTIONS = (
    LanguageOption('Русский (Russian)', 'korean_(south_korea)', is_recommended=True),
    LanguageOption('Chinese (Simplified)', 'chinese_(simplified)'),
    LanguageOption('Chinese (Traditional)', 'chinese_(traditional)'),
    LanguageOption('English', 'english'),
    LanguageOption('French (France)', 'french_(france)'),
    LanguageOption('German (Germany)', 'german_(germany)'),
    LanguageOption('Italian (Italy)', 'italian_(italy)'),
    LanguageOption('Japanese (Japan)', 'japanese_(japan)'),
    LanguageOption('Korean (South Korea)', 'korean_(south_korea)'),
    LanguageOption('Polish (Poland)', 'polish_(poland)'),
    LanguageOption('Portuguese (Brazil)', 'portuguese_(brazil)'),
    LanguageOption('Spanish (Latin America)', 'spanish_(latin_america)'),
    LanguageOption('Spanish (Spain)', 'spanish_(spain)'),
)
DEFAULT_LANGUAGE_CODE = LANGUAGE_OPTIONS[0].code

def is_known_language(code: str) -> bool:
    return any((option.code == code for option in LANGUAGE_OPTIONS))
