"""
Configuration for the FlashMint site
This file centralizes the language, token and chart settings.
"""

# In a real-world scenario, you might load this from a YAML or JSON file.
CONFIG = {
    'default_lang': 'th',
    'languages': ['th', 'en', 'zh'],
    'lang_button_text': {
        'th': 'TH - ไทย',
        'en': 'EN - English',
        'zh': 'CN - 中文'
    },
    'lang_flag_urls': {
        'th': 'https://flagcdn.com/w160/th.png',
        'en': 'https://flagcdn.com/w160/gb.png',
        'zh': 'https://flagcdn.com/w160/cn.png'
    },
    # (thousands separator, decimal separator)
    'locale_separators': {
        'th': (',', '.'),
        'en': (',', '.'),
        'zh': (',', '.')
    },
    'token_symbol': 'FM',
    'currency_suffix': 'USDT',
    'burn': {
        'initial_supply': 1_000_000_000,
        'years': 10,
        'rate': 0.90
    },
    'distribution': {
        'label_keys': ['distributionLabel1', 'distributionLabel2', 'distributionLabel3', 'distributionLabel4'],
        'shares': [15, 40, 20, 25],  # Community, Liquidity, Team, Ecosystem
        'colors': [
            'rgba(79, 70, 229, 0.8)',
            'rgba(59, 130, 246, 0.8)',
            'rgba(245, 158, 11, 0.8)',
            'rgba(107, 114, 128, 0.8)'
        ]
    },
    'chart_style': {
        'text_color': '#6b7280',
        'grid_color': 'rgba(0, 0, 0, 0.1)',
        'font_family': 'Kanit, sans-serif',
        'burn_bar_color': 'rgba(220, 38, 38, 0.7)',
        'burn_border_color': 'rgba(220, 38, 38, 1)'
    },
    'nft_button_classes': {
        'active': ('bg-indigo-600', 'text-white'),
        'inactive': ('bg-gray-200', 'text-gray-800')
    }
}
