# pos_checkout/utils/retry.py
import requests
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from pos_checkout.utils.settings import BACKEND_RETRY_ATTEMPTS


#default is a single attempt, no retry
def http_retry(attempts: int | None = None):
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts or BACKEND_RETRY_ATTEMPTS),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type(requests.RequestException),
    )
