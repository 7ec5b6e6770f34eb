def scan_prefix(*, table: str, key: str) -> str:
    return f"table={table} key={key}"


def copy_prefix(*, source: str, target: str) -> str:
    return f"copy {source} -> {target}"
