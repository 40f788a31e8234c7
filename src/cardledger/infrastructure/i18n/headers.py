"""
Column header translations.

Maps the English header keys of the register layouts to the Arabic
headers printed on the paper registers. Exports are written with these
exact strings and imports are matched against them.
"""

LEDGER_HEADERS = {
    "No.": "م",
    "Recipient Name": "اسم المستلم",
    "Department": "الادارة",
    "Receipt Date": "تاريخ الاستلام",
    "Card Type": "نوع البطاقة",
    "Card Number": "رقم البطاقة",
    "Card Code": "كود البطاقة",
    "Card Duration": "مدة البطاقة",
    "Attachment Name": "اسم المرفق",
    "Notes": "الملاحظات",
}

REGISTER_TITLES = {
    "Active Cards": "البطاقات الفعالة",
    "Recipients": "المستلمين",
}
