"""Bangla display strings keyed by atomic number or by English tag."""

DIGITS: dict[str, str] = {
    "0": "০",
    "1": "১",
    "2": "২",
    "3": "৩",
    "4": "৪",
    "5": "৫",
    "6": "৬",
    "7": "৭",
    "8": "৮",
    "9": "৯",
}

ELEMENT_NAMES: dict[int, str] = {
    1: "হাইড্রোজেন",
    2: "হিলিয়াম",
    3: "লিথিয়াম",
    4: "বেরিলিয়াম",
    5: "বোরন",
    6: "কার্বন",
    7: "নাইট্রোজেন",
    8: "অক্সিজেন",
    9: "ফ্লোরিন",
    10: "নিয়ন",
    11: "সোডিয়াম",
    12: "ম্যাগনেসিয়াম",
    13: "অ্যালুমিনিয়াম",
    14: "সিলিকন",
    15: "ফসফরাস",
    16: "সালফার",
    17: "ক্লোরিন",
    18: "আর্গন",
    19: "পটাশিয়াম",
    20: "ক্যালসিয়াম",
    21: "স্ক্যান্ডিয়াম",
    22: "টাইটানিয়াম",
    23: "ভ্যানাডিয়াম",
    24: "ক্রোমিয়াম",
    25: "ম্যাঙ্গানিজ",
    26: "আয়রন",
    27: "কোবাল্ট",
    28: "নিকেল",
    29: "কপার",
    30: "জিংক",
    31: "গ্যালিয়াম",
    32: "জার্মেনিয়াম",
    33: "আর্সেনিক",
    34: "সেলেনিয়াম",
    35: "ব্রোমিন",
    36: "ক্রিপ্টন",
    37: "রুবিডিয়াম",
    38: "স্ট্রনশিয়াম",
    39: "ইট্রিয়াম",
    40: "জিরকোনিয়াম",
    41: "নাইওবিয়াম",
    42: "মলিবডেনাম",
    43: "টেকনেশিয়াম",
    44: "রুথেনিয়াম",
    45: "রোডিয়াম",
    46: "প্যালাডিয়াম",
    47: "রূপা",
    48: "ক্যাডমিয়াম",
    49: "ইন্ডিয়াম",
    50: "টিন",
    51: "অ্যান্টিমনি",
    52: "টেলুরিয়াম",
    53: "আয়োডিন",
    54: "জেনন",
    55: "সিজিয়াম",
    56: "বেরিয়াম",
    57: "ল্যান্থানাম",
    58: "সিরিয়াম",
    59: "প্রাসিওডিমিয়াম",
    60: "নিওডিমিয়াম",
    61: "প্রমিথিয়াম",
    62: "স্যামারিয়াম",
    63: "ইউরোপিয়াম",
    64: "গ্যাডোলিনিয়াম",
    65: "টার্বিয়াম",
    66: "ডিস্প্রোসিয়াম",
    67: "হলমিয়াম",
    68: "ইরবিয়াম",
    69: "থুলিয়াম",
    70: "ইটারবিয়াম",
    71: "লুটেশিয়াম",
    72: "হাফনিয়াম",
    73: "ট্যানটালাম",
    74: "টাংস্টেন",
    75: "রেনিয়াম",
    76: "অসমিয়াম",
    77: "ইরিডিয়াম",
    78: "প্লাটিনাম",
    79: "সোনা",
    80: "পারদ",
    81: "থ্যালিয়াম",
    82: "সীসা",
    83: "বিসমাথ",
    84: "পোলোনিয়াম",
    85: "অ্যাস্টাটিন",
    86: "রেডন",
    87: "ফ্রান্সিয়াম",
    88: "রেডিয়াম",
    89: "অ্যাক্টিনিয়াম",
    90: "থোরিয়াম",
    91: "প্রোট্যাক্টিনিয়াম",
    92: "ইউরেনিয়াম",
    93: "নেপচুনিয়াম",
    94: "প্লুটোনিয়াম",
    95: "আমেরিসিয়াম",
    96: "কুরিয়াম",
    97: "বার্কেলিয়াম",
    98: "ক্যালিফোর্নিয়াম",
    99: "আইনস্টাইনিয়াম",
    100: "ফার্মিয়াম",
    101: "মেন্ডেলিভিয়াম",
    102: "নোবেলিয়াম",
    103: "লরেন্সিয়াম",
    104: "রাদারফোর্ডিয়াম",
    105: "ডুবনিয়াম",
    106: "সিবোর্গিয়াম",
    107: "বোহরিয়াম",
    108: "হ্যাসিয়াম",
    109: "মেইটনেরিয়াম",
    110: "ডার্মস্টাটিয়াম",
    111: "রন্টজেনিয়াম",
    112: "কোপার্নিসিয়াম",
    113: "নিহোনিয়াম",
    114: "ফ্লেরোভিয়াম",
    115: "মস্কোভিয়াম",
    116: "লিভারমোরিয়াম",
    117: "টেনেসাইন",
    118: "অগানেসন",
}

OTHER_METAL = "অন্যান্য ধাতু"

KINDS: dict[str, str] = {
    "Alkali Metal": "ক্ষার ধাতু",
    "Alkaline Earth Metal": "মৃৎক্ষার ধাতু",
    "Lanthanide": "ল্যান্থানাইড",
    "Actinide": "অ্যাক্টিনাইড",
    "Transition Metal": "অবস্থান্তর ধাতু",
    "Metalloid": "ধাতুকল্প",
    "Nonmetal": "অন্যান্য অধাতু",
    "Halogen": "হ্যালোজেন",
    "Noble Gas": "নিষ্ক্রিয় গ্যাস",
    "Post Transition Metal": OTHER_METAL,
}

UNKNOWN_STATE = "অজ্ঞাত"

STATES: dict[str, str] = {
    "Gas": "বায়বীয়",
    "Solid": "কঠিন",
    "Liquid": "তরল",
}

FIELD_LABELS: dict[str, str] = {
    "Kind": "প্রকার",
    "Atomic Mass": "পারমাণবিক ভর",
    "Group": "গ্রুপ",
    "Period": "পর্যায়",
    "Protons": "প্রোটন",
    "Neutrons": "নিউট্রন",
    "Electrons": "ইলেকট্রন",
    "State": "অবস্থা",
    "Electronegativity": "তড়িৎঋণাত্মকতা",
}

NOT_APPLICABLE = "প্রযোজ্য নয়"

UI_TEXT: dict[str, str] = {
    "search_placeholder": "অনুসন্ধান করুন...",
    "language_toggle": "English",
    "back": "ফিরে যান",
    "no_results": "কোনো মৌল পাওয়া যায়নি",
}
