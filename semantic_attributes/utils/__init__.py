from .serialisation import humanize_number, pascal_case_to_snake_case

__all__ = [
    "humanize_number",
    "pascal_case_to_snake_case",
]
