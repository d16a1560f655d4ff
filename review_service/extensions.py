from review_service.services.content_store import ContentStoreClient
from review_service.services.revalidation import Revalidator
from review_service.services.verification_client import VerificationClient

verification_client = VerificationClient()
content_store = ContentStoreClient()
revalidator = Revalidator()
