"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
Size conversions for CLI input (--chunk-size) and statistics output.
"""

_UNITS = {
    'GB': 1024 ** 3, 'G': 1024 ** 3,
    'MB': 1024 ** 2, 'M': 1024 ** 2,
    'KB': 1024, 'K': 1024,
    'B': 1,
}


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 1.50KB, 3.20MB).
        """
        if size_bytes < 0:
            return "0B"

        size = float(size_bytes)
        for unit in ["B", "KB", "MB", "GB", "TB"]:
            if size < 1024:
                return f"{size:.2f}{unit}"
            size /= 1024
        return f"{size:.2f}PB"

    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Convert human-readable size string to bytes.
        Supports formats: '64K', '1.5MB', '4096', '1G'.
        Raises ValueError for negative sizes or invalid formats.
        """
        size_str = size_str.strip().upper()

        # Longest suffix first so 'KB' is not read as 'K' + 'B'
        for unit in sorted(_UNITS, key=len, reverse=True):
            if size_str.endswith(unit):
                value_str = size_str[:-len(unit)].strip()
                try:
                    value = float(value_str)
                except ValueError:
                    raise ValueError(f"Invalid numeric value in size: '{value_str}'")

                if value < 0:
                    raise ValueError(f"Negative size not allowed: '{size_str}'")
                return int(value * _UNITS[unit])

        try:
            value = int(size_str)
        except ValueError:
            raise ValueError(
                f"Invalid size format: '{size_str}'. "
                f"Supported formats: 64K, 1.5MB, 4096, 1G"
            )

        if value < 0:
            raise ValueError(f"Negative size not allowed: '{size_str}'")
        return value
