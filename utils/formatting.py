def format_population(pop: int) -> str:
    """Compact population label: 1.2M, 3.4K, or the plain number."""
    if pop >= 1_000_000:
        return f"{pop / 1_000_000:.1f}M"
    if pop >= 1_000:
        return f"{pop / 1_000:.1f}K"
    return str(pop)


def format_area(area: float) -> str:
    if not area:
        return "N/A"
    return f"{area:,.0f} km²"
