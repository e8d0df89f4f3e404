import logging
import re
from typing import Any, Dict, List

from models import ImportedRow
from services.category import CATEGORIES


logger = logging.getLogger(__name__)


class DataValidator:
    """Soft checks on imported rows. Findings are reported, rows are never dropped."""

    def __init__(self):
        self.validation_stats = {
            'total_records': 0,
            'clean_records': 0,
            'records_with_warnings': 0,
            'duplicate_keys': 0,
            'warnings': []
        }

    def validate_email(self, email: str) -> bool:
        return bool(re.match(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$", email))

    def validate_phone(self, phone: str) -> bool:
        digits = re.sub(r"\D", "", phone)
        return len(digits) >= 7

    def validate_record(self, imported: ImportedRow) -> List[str]:
        """Return warnings for a single mapped row."""
        warnings = []
        rec = imported.record

        if not rec.name:
            warnings.append("Missing name")
        if not rec.location:
            warnings.append("Missing location")
        if rec.category not in CATEGORIES:
            warnings.append(f"Unrecognized category: {rec.category}")
        if rec.email and not self.validate_email(rec.email):
            warnings.append("Email format looks invalid")
        if rec.phone and not self.validate_phone(rec.phone):
            warnings.append("Phone number too short to be valid")
        if rec.portfolio_url and not rec.portfolio_url.startswith(('http://', 'https://')):
            warnings.append("Portfolio link should start with http(s)://")

        return warnings

    def validate_all_records(self, records: List[ImportedRow]) -> List[ImportedRow]:
        """Validate all rows, log findings and return them unchanged."""
        seen_keys = set()

        logger.info(f"Starting validation of {len(records)} records")

        for imported in records:
            warnings = self.validate_record(imported)
            if imported.doc_id:
                if imported.doc_id in seen_keys:
                    # Later row merges into the earlier document on write
                    warnings.append(f"Duplicate key {imported.doc_id} in sheet")
                    self.validation_stats['duplicate_keys'] += 1
                seen_keys.add(imported.doc_id)

            self.validation_stats['total_records'] += 1
            if warnings:
                self.validation_stats['records_with_warnings'] += 1
                self.validation_stats['warnings'].extend(
                    f"row {imported.row_number}: {w}" for w in warnings
                )
                logger.warning(f"Row {imported.row_number} has warnings: {warnings}")
            else:
                self.validation_stats['clean_records'] += 1

        logger.info(f"Validation completed. Clean: {self.validation_stats['clean_records']}, "
                    f"With warnings: {self.validation_stats['records_with_warnings']}")

        return records

    def get_validation_stats(self) -> Dict[str, Any]:
        """Return validation statistics."""
        stats = self.validation_stats.copy()
        stats['warnings'] = list(self.validation_stats['warnings'])
        return stats
