from decouple import config

ORDERS_DEFAULT_CURRENCY = config("ORDERS_DEFAULT_CURRENCY", default="USD")
ORDERS_DEFAULT_PAYMENT_METHOD = config("ORDERS_DEFAULT_PAYMENT_METHOD", default="apple_pay")
# Candidates drawn before order creation gives up with a 503.
ORDER_NUMBER_MAX_ATTEMPTS = config("ORDER_NUMBER_MAX_ATTEMPTS", default=10, cast=int)
# When False, unitPrice overrides are ignored and the total is recomputed from catalog prices.
ORDERS_TRUST_CLIENT_PRICING = config("ORDERS_TRUST_CLIENT_PRICING", default=True, cast=bool)
# Lines asking for more tickets than this are skipped at checkout.
ORDER_MAX_TICKETS_PER_LINE = config("ORDER_MAX_TICKETS_PER_LINE", default=50, cast=int)
