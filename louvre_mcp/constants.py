
# 站点配置
# ====================
BASE_URL = "https://collections.louvre.fr"
API_PATH = "ark:/53355"
SEARCH_PATH = "/recherche"
USER_AGENT = "louvremcp-app/1.0"
HEADERS = {
    'User-Agent': USER_AGENT,
    'Accept-Language': 'fr,en;q=0.8',
}

# 请求配置
TIMEOUT = 15
RESULTS_PER_PAGE = 20

# HTML 选择器
# ====================
SEARCH_CARD_SELECTOR = "#search__grid .card__outer"
CARD_TITLE_SELECTOR = ".card__title"
CARD_AUTHOR_SELECTOR = ".card__author"
RESULT_COUNT_SELECTOR = ".search__results__count"

# 图片类型
# ====================
UNSPECIFIED_TYPE = "unspecified"
THUMBNAIL_TYPE = "thumbnail"
FULL_TYPE = "full"
UNKNOWN_TYPE = "unknown"

# URL 子串 -> 类型 (按顺序匹配)
IMAGE_TYPE_HINTS = [
    (("small", "thumb"), THUMBNAIL_TYPE),
    (("large", "full"), FULL_TYPE),
]
