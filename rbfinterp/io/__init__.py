from .rbfi import RBFI_FORMAT, ensure_rbfi_path, read_rbfi, write_rbfi
