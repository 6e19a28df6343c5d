SUPPORTED_EXTENSIONS = frozenset(
    {
        ".jpg",
        ".jpeg",
        ".png",
        ".gif",
        ".bmp",
        ".tiff",
        ".webp",
    }
)

DEFAULT_CULTURE = "en-US"
SUPPORTED_CULTURES = ("en-US", "zh-CN")

# 主菜单按键
MENU_KEY_DIALOG = "1"
MENU_KEY_PASTE = "2"
MENU_KEY_FINISH = "3"

# 输出格式按键，其他任意键均视为换行格式
FORMAT_KEY_COMMA = "2"

NULL_KEY = "\0"
COMMA_SEPARATOR = ", "
