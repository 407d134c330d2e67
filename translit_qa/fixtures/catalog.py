"""Built-in case catalogue and fixture workbook generation."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from openpyxl import Workbook, load_workbook

from translit_qa.models.test_case import Polarity, TranslationCase

from .store import HEADER, TEST_CASES_SHEET

logger = logging.getLogger(__name__)

INSTRUCTIONS_SHEET = "How to fill columns A and C"
COVERAGE_SHEET = "Test Coverage Summary"

COLUMN_WIDTHS = [12, 40, 15, 50, 50, 50, 10, 80, 40]

_POSITIVE = [
    ("Pos_Fun_0001", "Entrance of attendance in a Sri Lankan", "M",
     "mama gedhara yanawa, habayi vahi na nisa dhenma yanne naha",
     "මම ගෙදර යනවා, හැබැයි වහින නිසා දැන්ම යන්නේ නෑ",
     "Two clauses correctly joined. Conjunction 'habayi' properly rendered.",
     "Compound sentence\nWord combination / phrase pattern\nM (31–299 characters)\nAccuracy validation"),
    ("Pos_Fun_0002", "Condition of different sentences", "S",
     "vassa nathnam yanna epayi.", "වැස්ස නැත්නම් යන්න එපයි.",
     "Conditional logic preserved. Verb 'epayi' correctly converted.",
     "Complex sentence\nDaily language usage\nS (≤30 characters)\nAccuracy validation"),
    ("Pos_Fun_0003", "Direct command", "S",
     "israhata yana.", "ඉස්සරහට යන්න.",
     "Direct imperative correctly transliterated. No extra words.",
     "Imperative (command)\nDaily language usage\nS (≤30 characters)\nAccuracy validation"),
    ("Pos_Fun_0004", "Positive future tense", "S",
     "api heta ennam.", "අපි හෙට එන්නම්.",
     "Future tense correctly expressed. Plural pronoun 'api' properly rendered.",
     "Future tense\nInformal\nS (≤30 characters)\nAccuracy validation"),
    ("Pos_Fun_0005", "Negative present tense", "S",
     "api heta ennee naha.", "අපි හෙට එන්නේ නැහැ.",
     "Negation pattern correctly converted. Meaning preserved.",
     "Negative (affirmative form)\nPresent tense\nS (≤30 characters)\nAccuracy validation"),
    ("Pos_Fun_0006", "Common greeting with exclamation", "S",
     "ayubovan!", "ආයුබෝවන්!",
     "Standard greeting correctly transliterated. Exclamation retained.",
     "Simple sentence\nAccuracy validation\nS (≤30 characters)\nAccuracy validation"),
    ("Pos_Fun_0007", "Informal colloquial phrase", "S",
     "ayi, meka dhiyan", "ඇයි, මේක දියන්.",
     "Colloquial words correctly rendered. Informational tone preserved.",
     "Informal language\nS (≤30 characters)\nAccuracy validation"),
    ("Pos_Fun_0008", "Daily expression of feeling", "S",
     "karuNaakaralaa mata podi udhavvak karanna puLuvandha?",
     "කරුණාකරලා මට පොඩි උදව්වක් කරන්න පුළුවන්ද?",
     "Polite phrasing maintained.",
     "Polite phrasing\ninterrogative\nS (≤30 characters)\nAccuracy validation"),
    ("Pos_Fun_0009", "Informal command", "S",
     "eeka dhenna.", "ඒක දෙන්න.",
     "Casual tone converted.",
     "Informal phrasing\nimperative\nS (≤30 characters)\nAccuracy validation"),
    ("Pos_Fun_0010", "Day-to-day expression", "S",
     "mata nidhimathayi.", "මට නිදිමතයි.",
     "Common phrase accurate.",
     "Daily language\nSimple sentence\nS (≤30 characters)\nFormatting preservation"),
    ("Pos_Fun_0011", "Multi-word collocation", "S",
     "mata oona", "මට ඕන",
     "Frequent pair handled",
     "Word combination\nSimple sentence\nS (≤30 characters)\nFormatting preservation"),
    ("Pos_Fun_0012", "Proper spacing", "S",
     "mama gedhara yanawa.", "මම ගෙදර යනවා.",
     "Words segmented correctly",
     "Proper spacing\nS (≤30 characters)\nReal-time output update behavior"),
    ("Pos_Fun_0013", "Repeated emphasis", "S",
     "hari hari", "හරි හරි",
     "Duplication preserved.",
     "Repeated words\nSimple sentence\nS (≤30 characters)"),
    ("Pos_Fun_0014", "Past tense singular", "S",
     "mama iiyee gedhara giya.", "මම ඊයේ ගෙදර ගියා.",
     "Past form for singular pronoun.",
     "Past tense\nsingular pronoun\nS (≤30 characters)\nAccuracy validation"),
    ("Pos_Fun_0015", "Present plural", "S",
     "api kaeema kanawa.", "අපි කෑම කනවා.",
     "Plural pronoun correct.",
     "Present tense\nPlural usage\nS (≤30 characters)\nAccuracy validation"),
    ("Pos_Fun_0016", "Future plural", "S",
     "api yamu.", "අපි යමු.",
     "Group future action",
     "Future tense\nPlural pronoun\nS (≤30 characters)\nReal-time output update behavior"),
    ("Pos_Fun_0017", "Mixed English words", "M",
     "online class ekak thiyennee.", "online class එකක් තියෙන්නේ.",
     "online unchanged, rest converted.",
     "Mixed Singlish+English\ntechnical terms\nM (31–299 characters)\nRobustness validation"),
    ("Pos_Fun_0018", "Places and English words", "M",
     "mama Kandy yanna hadhannee.", "මම Kandy යන්න හදන්නේ.",
     "Kandy preserved.",
     "Mixed Singlish + English\nPresent tense\nM (31–299 characters)\nRobustness validation"),
    ("Pos_Fun_0019", "Abbreviations", "S",
     "LOL", "LOL",
     "Short forms intact",
     "English abbreviations\nWord combination\nS (≤30 characters)\nAccuracy validation"),
    ("Pos_Fun_0020", "Currency", "S",
     "Rs. 500", "Rs. 500",
     "Formats preserved.",
     "Currency\nS (≤30 characters)\nFormatting preservation"),
    ("Pos_Fun_0021", "Multiple spaces", "S",
     "mama gedhara yanawa.", "මම ගෙදර යනවා.",
     "Extra spaces handled.",
     "Formatting\nSimple sentence\nS (≤30 characters)\nAccuracy validation"),
    ("Pos_Fun_0022", "Long paragraph input", "L",
     "dhitvaa suLi kuNaatuva ... bimal rathnaayaka saDHahan kaLeeya.",
     "දිට්වා සුළි කුණාටුව ... බිමල් රත්නායක සඳහන් කළේය.",
     "Full text converted",
     "Informal language\nPast tense\nL (≥ 300 characters)\nFormatting preservation"),
    ("Pos_Fun_0023", "Punctuation variety", "S",
     "hari? (oyaa)", "හරි? (ඔයා)",
     "Marks preserved.",
     "Punctuation\nPronoun variation\nS (≤30 characters)\nFormatting preservation"),
    ("Pos_Fun_0024", "Interrogative sentence", "S",
     "oyaa kohomadha?", "ඔයා කොහොමද?",
     "Question form correctly converted.",
     "Interrogative\nSimple sentence\nS (≤30 characters)\nAccuracy validation"),
]

_NEGATIVE = [
    ("Neg_Fun_0001", "Joined words no spaces", "S",
     "mamagedharayanawa", "මම ගෙදර යනවා.",
     "Incorrect segmentation or partial fail.",
     "Joined words\nPresent tense\nS (≤30 characters)\nrobustness"),
    ("Neg_Fun_0002", "Heavy slang", "S",
     "ela machan!", "එළ මචං!",
     "Slang not fully handled",
     "Slang / informal language\nSimple sentence\nS (≤30 characters)\nRobustness validation"),
    ("Neg_Fun_0003", "Chat shorthand", "S",
     "thnx bn!", "thanks බං!",
     "Unchanged or garbled per note",
     "Slang\nSimple sentence\nS (≤30 characters)\nRobustness validation"),
    ("Neg_Fun_0004", "No space", "M",
     "Oya gedara yanava.mamath enava", "ඔයා ගෙදර යනවා.මමත් එනවා",
     "Fail to convert rightly",
     "Formatting\nCompound sentence\nM (31–299 characters)\nFormatting preservation"),
    ("Neg_Fun_0005", "Sentence convert Inconsistent", "S",
     "mokakhari karapu wade", "මොකක් හරි කරපු වැඩේ",
     "System fail to join words correctly",
     "Informal language\nSimple sentence\nS (≤30 characters)\nRobustness validation"),
    ("Neg_Fun_0006", "Repeated slang emphasis", "S",
     "ayi mokadha wenne", "ඇයි මොකද වෙන්නේ",
     "Emphasis slang fails.",
     "Repeated slang\nSimple sentence\nS (≤30 characters)\nRobustness validation"),
    ("Neg_Fun_0007", "Abbreviations", "S",
     "LVMH", "Love you so Much",
     "Not preserved correctly.",
     "English abbreviations\nWord combination\nS (≤30 characters)\nRobustness validation"),
    ("Neg_Fun_0008", "Polite with slang", "S",
     "Please... kiyahanko", "කරුණාකරලා... කියහන්කෝ",
     "Mix fails.",
     "Slang\nSimple sentence\nS (≤30 characters)\nRobustness validation"),
    ("Neg_Fun_0009", "Negation with joined", "S",
     "kiyanne naha", "කියන්නේ නෑ",
     "Negation pattern broken.",
     "Daily language usage\nNegation\nS (≤30 characters)\nRobustness validation"),
    ("Neg_Fun_0010", "Mixed case English abbreviation", "S",
     "Hi oyaa hodindha?", "hello ඔයාට කොහොමද",
     "Fail to convert rightly",
     "Greeting\nSimple sentence\nS (≤30 characters)\nRobustness validation"),
]

_UI = [
    ("Pos_UI_0001", "Real-time output update", "S",
     "mama game yanava", "මම ගෙදර යනවා",
     "Output updates live without lag",
     "Formatting\nPresent tense\nS (≤30 characters)\nIssue handling / input validation"),
]


def _to_case(row: tuple) -> TranslationCase:
    case_id, name, length, input_text, expected, justification, coverage = row
    return TranslationCase(
        case_id=case_id,
        name=name,
        length_class=length,
        input_text=input_text,
        expected_output=expected,
        justification=justification,
        coverage=coverage,
    )


def builtin_cases() -> list[TranslationCase]:
    """The default catalogue: positive functional, negative functional, then UI cases."""
    return [_to_case(row) for row in (*_POSITIVE, *_NEGATIVE, *_UI)]


def _replace_sheet(wb: Workbook, title: str):
    if title in wb.sheetnames:
        del wb[title]
    return wb.create_sheet(title)


def write_fixture_workbook(
    path: str | Path,
    cases: list[TranslationCase] | None = None,
    sheet_name: str = TEST_CASES_SHEET,
) -> Path:
    """Write (or refresh) the fixture workbook with the given cases.

    Cases go to ``sheet_name``. Other sheets already present in an existing
    workbook are kept; the case, instruction and coverage sheets are
    regenerated.
    """
    path = Path(path)
    cases = builtin_cases() if cases is None else cases

    if path.exists():
        wb = load_workbook(path)
    else:
        wb = Workbook()
        wb.remove(wb.active)

    ws = _replace_sheet(wb, sheet_name)
    ws.append(HEADER)
    for case in cases:
        ws.append([
            case.case_id,
            case.name,
            case.length_class or "",
            case.input_text,
            case.expected_output,
            "",
            "",
            case.justification,
            case.coverage,
        ])
    for col, width in enumerate(COLUMN_WIDTHS, start=1):
        ws.column_dimensions[ws.cell(row=1, column=col).column_letter].width = width

    instructions = _replace_sheet(wb, INSTRUCTIONS_SHEET)
    for line in (
        "Test case ID conventions:",
        "1. Positive functional test cases should begin with 'Pos_Fun'",
        "2. Negative functional test cases should begin with 'Neg_Fun'",
        "3. UI test cases should begin with 'Pos_UI'",
    ):
        instructions.append([line])

    coverage = _replace_sheet(wb, COVERAGE_SHEET)
    coverage.append(["TEST COVERAGE SUMMARY"])
    coverage.append(["Generated: " + datetime.now(timezone.utc).isoformat()])
    coverage.append([])
    coverage.append(["Positive cases", sum(1 for c in cases if c.polarity is Polarity.POSITIVE)])
    coverage.append(["Negative cases", sum(1 for c in cases if c.polarity is Polarity.NEGATIVE)])
    coverage.append(["Total cases", len(cases)])

    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)
    logger.info("Fixture workbook written to %s (%d cases)", path, len(cases))
    return path
