"""Quickstart example for posixlocale.

This example demonstrates building, parsing and validating POSIX locale
identifiers with the loose and strict layers.

Note: Example 4 and later use CldrLookup, which requires Babel:
    pip install posixlocale[babel]
"""

from posixlocale import (
    CldrLookup,
    CodeTable,
    LocaleError,
    LocaleParseError,
    LocaleString,
    StrictLocaleFactory,
    StrictLocaleString,
    UnknownCodeError,
    convert,
)
from posixlocale.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Building an identifier
print("=" * 50)
print("Example 1: Building an Identifier")
print("=" * 50)

locale = (
    LocaleString.new("en")
    .with_territory("US")
    .with_code_set("UTF-8")
    .with_modifiers({"collation": "pinyin", "currency": "CNY"})
)
print(locale)
# Output: en_US.UTF-8@collation=pinyin;currency=CNY

# Example 2: Parsing
print("\n" + "=" * 50)
print("Example 2: Parsing")
print("=" * 50)

parsed = LocaleString.parse("sr_RS@latin")
print(parsed.language, parsed.territory, parsed.code_set, parsed.modifier)
# Output: sr RS None latin

for raw in ["en_", "C", "en_U S"]:
    try:
        LocaleString.parse(raw)
    except LocaleParseError as e:
        print(f"{raw!r}: {e.reason}")
# Output:
# 'en_': empty_segment
# 'C': posix_unsupported
# 'en_U S': invalid_segment

# Example 3: Strict validation against a fixed table
print("\n" + "=" * 50)
print("Example 3: Strict Validation (Fixed Table)")
print("=" * 50)

table = CodeTable.of(languages=["en", "fr"], territories=["US", "FR"], code_sets=["UTF-8"])
print(StrictLocaleString.parse("fr_FR.UTF-8", lookup=table))
# Output: fr_FR.UTF-8

try:
    StrictLocaleString.parse("xx_US", lookup=table)
except UnknownCodeError as e:
    print(f"{e.kind.name}: {e.value}")
# Output: UNKNOWN_LANGUAGE_CODE: xx

# Example 4: Strict validation against CLDR
print("\n" + "=" * 50)
print("Example 4: Strict Validation (CLDR)")
print("=" * 50)

cldr = StrictLocaleFactory(CldrLookup())
print(cldr.parse("de_DE.ISO8859-15@euro"))
# Output: de_DE.ISO8859-15@euro

promoted = convert(LocaleString.parse("es_419.UTF-8"), cldr)
print(type(promoted).__name__, promoted)
# Output: StrictLocaleString es_419.UTF-8

# Example 5: Diagnostics
print("\n" + "=" * 50)
print("Example 5: Diagnostics")
print("=" * 50)

try:
    cldr.parse("en_QQ")
except LocaleError as e:
    print(e)
    print(DiagnosticFormatter(output_format=OutputFormat.JSON).format(e.diagnostic))
# Output:
# error[UNKNOWN_TERRITORY]: Territory 'QQ' is not a known territory code
#   = field: territory
#   = value: QQ
#   = help: Use an ISO 3166-1 alpha-2 code such as 'US' or 'DE'
#   = note: see https://www.iso.org/iso-3166-country-codes.html
# {"code": "UNKNOWN_TERRITORY", "code_value": 2002, ...}
