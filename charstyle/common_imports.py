"""
Common imports file for the Character Style Customizer
Import this file in other modules to get all standard imports
"""

# ========== 1. STANDARD LIBRARY IMPORTS ==========
import sys
import os
import json
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Any, Callable, Iterable, Union
from dataclasses import dataclass, field
from urllib.parse import urlsplit, unquote

# ========== 2. PySide6 IMPORTS ==========
try:
    from PySide6.QtCore import QObject, Signal, QTimer
except ImportError as e:
    print(f"Critical Error: PySide6 import failed: {e}")
    sys.exit(1)

# ========== 3. THIRD-PARTY IMPORTS ==========
from PIL import ImageColor

# ========== 4. UTILITY FUNCTIONS ==========
def safe_json_save(data: Dict, file_path: str) -> bool:
    try:
        os.makedirs(os.path.dirname(file_path), exist_ok=True)
        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        return True
    except Exception:
        return False
