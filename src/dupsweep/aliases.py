from dupsweep.core.models import HashAlgorithmName

ALGORITHM_ALIASES = {
    "xxh128": HashAlgorithmName.XXH128,
    "xxhash": HashAlgorithmName.XXH128,
    "sha256": HashAlgorithmName.SHA256,
    "blake2b": HashAlgorithmName.BLAKE2B,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Content digest used to confirm duplicates (default: xxh128):\n"
    + "".join(f"  {name.value:<9}: {name.description}\n" for name in HashAlgorithmName)
    + "Example    : %(prog)s ~/Downloads --algorithm sha256\n"
)

EPILOG_TEXT = """
Examples:
  Find duplicates in the current directory
  %(prog)s

  Find duplicates in Downloads, ignoring git internals and temp files
  %(prog)s ~/Downloads '/\\.git/' '\\.tmp$'

  Keep going past unreadable files and list them at the end
  %(prog)s /srv/share --skip-unreadable

  Hash several size classes in parallel and show statistics
  %(prog)s ~/Pictures --jobs 4 --verbose
"""
