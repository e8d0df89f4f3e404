from .professional_record import ImportedRow, ProfessionalRecord

__all__ = [
    "ImportedRow",
    "ProfessionalRecord",
]
