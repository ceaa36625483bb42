#!/usr/bin/env python3
"""
Default configuration values for segchain
"""

DEFAULT_CONFIG = {
    'logging': {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    },
    'algebra': {
        # Chain union joins touching runs such as 1-5 and 6-9
        'merge_adjacent': True,
    },
}
