"""
User-facing notification texts.

Keyed by message id; ``ARABIC_MESSAGES`` is what the registers show,
``ENGLISH_MESSAGES`` backs the English interface.
"""

ARABIC_MESSAGES = {
    "row_added": "تم إضافة صف جديد بنجاح",
    "row_deleted": "تم حذف الصف بنجاح",
    "confirm_delete": "هل أنت متأكد من حذف هذا الصف؟",
    "export_success": "تم تصدير الملف بنجاح",
    "export_failed": "حدث خطأ أثناء التصدير",
    "import_success": "تم استيراد البيانات بنجاح",
    "import_empty": "الملف فارغ أو لا يحتوي على بيانات صالحة",
    "import_failed": "حدث خطأ أثناء قراءة الملف. تأكد من صحة التنسيق.",
    "print_success": "تم تجهيز ملف الطباعة بنجاح",
    "no_attachment": "لا يوجد",
    "toast_success": "نجاح",
    "toast_error": "تنبيه",
}

ENGLISH_MESSAGES = {
    "row_added": "New row added",
    "row_deleted": "Row deleted",
    "confirm_delete": "Are you sure you want to delete this row?",
    "export_success": "File exported",
    "export_failed": "An error occurred while exporting",
    "import_success": "Data imported",
    "import_empty": "The file is empty or contains no valid data",
    "import_failed": "An error occurred while reading the file. Check the format.",
    "print_success": "Print sheet ready",
    "no_attachment": "None",
    "toast_success": "Success",
    "toast_error": "Notice",
}
