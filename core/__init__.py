"""Domain core: exceptions, validation rules, DTOs and records."""
