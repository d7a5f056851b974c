CURRENCY = "EUR"

# price for products whose id is not a plain number
DEFAULT_PRICE = 1.0

PRODUCT_ID_SEPARATOR = "$"
CLIENT_PREFIX = "client"

PDF_MEDIA_TYPE = "application/pdf"
ODT_MEDIA_TYPE = "application/vnd.oasis.opendocument.text"
PARSER_MEDIA_TYPES = (PDF_MEDIA_TYPE, ODT_MEDIA_TYPE)
