import unittest
from unittest.mock import Mock, patch

from review_service.app import create_app
from review_service.models.review import Review
from tests.test_validation import valid_payload


class TestReviewSubmission(unittest.TestCase):
    def setUp(self):
        self.app = create_app({'TESTING': True, 'SANITY_WEBHOOK_SECRET': 'test-secret'})
        self.client = self.app.test_client()

        patchers = {
            'verification_client': patch('review_service.routes.reviews.verification_client'),
            'content_store': patch('review_service.routes.reviews.content_store'),
            'capture_exception': patch('review_service.routes.reviews.capture_exception'),
        }
        for name, patcher in patchers.items():
            setattr(self, name, patcher.start())
            self.addCleanup(patcher.stop)

    def test_verified_review_is_created(self):
        self.verification_client.does_code_match.return_value = True

        resp = self.client.post('/reviews', json=valid_payload())

        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.get_json(), {})
        self.verification_client.does_code_match.assert_called_once_with('jdoe3', '123456')
        self.content_store.create_review.assert_called_once()

        review = self.content_store.create_review.call_args[0][0]
        self.assertIsInstance(review, Review)
        self.assertEqual(review.to_dict(), {
            'courseId': 'course-1',
            'semesterId': 'semester-1',
            'rating': 4,
            'difficulty': 3,
            'workload': 10,
            'body': 'Great lectures, rough exams.',
            'username': 'jdoe3',
        })

    def test_out_of_range_fields_never_reach_the_store(self):
        for field, value in (('rating', 6), ('difficulty', 0), ('workload', 101)):
            resp = self.client.post('/reviews', json=valid_payload(**{field: value}))
            self.assertEqual(resp.status_code, 400)
            self.assertTrue(any(field in error for error in resp.get_json()['errors']))

        self.verification_client.does_code_match.assert_not_called()
        self.content_store.create_review.assert_not_called()

    def test_mismatched_code(self):
        self.verification_client.does_code_match.return_value = False

        resp = self.client.post('/reviews', json=valid_payload())

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.get_json(), {
            'errors': ["The supplied code doesn't match the code that was sent."]
        })
        self.content_store.create_review.assert_not_called()

    def test_verification_failure_is_reported(self):
        error = RuntimeError('twilio down')
        self.verification_client.does_code_match.side_effect = error

        resp = self.client.post('/reviews', json=valid_payload())

        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.get_json(), {'errors': ['Error creating review. Try again later.']})
        self.content_store.create_review.assert_not_called()
        self.capture_exception.assert_called_once_with(error)

    def test_store_failure_is_reported(self):
        self.verification_client.does_code_match.return_value = True
        self.content_store.create_review.side_effect = RuntimeError('sanity down')

        resp = self.client.post('/reviews', json=valid_payload())

        self.assertEqual(resp.status_code, 500)
        self.assertNotIn('sanity down', resp.get_data(as_text=True))
        self.capture_exception.assert_called_once()

    def test_missing_body(self):
        resp = self.client.post('/reviews', data='not json', content_type='text/plain')
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.get_json(), {'errors': ['request body must be a JSON object']})

    def test_only_post_is_allowed(self):
        resp = self.client.get('/reviews')
        self.assertEqual(resp.status_code, 405)
        self.assertEqual(resp.get_json(), {})
        self.verification_client.does_code_match.assert_not_called()


class TestReviewSubmissionAgainstStore(unittest.TestCase):
    def setUp(self):
        self.app = create_app({'TESTING': True, 'SANITY_WEBHOOK_SECRET': 'test-secret'})
        self.client = self.app.test_client()

        client_patcher = patch('review_service.routes.reviews.verification_client')
        post_patcher = patch('review_service.services.content_store.requests.post')
        self.verification_client = client_patcher.start()
        self.post = post_patcher.start()
        self.addCleanup(client_patcher.stop)
        self.addCleanup(post_patcher.stop)

    def test_saved_review_with_undecodable_response_is_created(self):
        self.verification_client.does_code_match.return_value = True
        self.post.return_value = Mock(status_code=200)
        self.post.return_value.json.side_effect = ValueError('not json')

        resp = self.client.post('/reviews', json=valid_payload())

        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.get_json(), {})
        self.post.assert_called_once()


if __name__ == '__main__':
    unittest.main()
