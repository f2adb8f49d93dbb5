"""Value types shared across strmech: enums, character arrays, result DTOs."""
