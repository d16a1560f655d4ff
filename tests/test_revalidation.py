import unittest
from unittest.mock import Mock, patch

import requests

from review_service.errors import UpstreamError
from review_service.services.revalidation import Revalidator


class TestRevalidator(unittest.TestCase):
    def setUp(self):
        self.revalidator = Revalidator()
        self.revalidator.url = 'https://courses.example.edu/api/revalidate'
        self.revalidator.token = 'revalidate-token'
        self.revalidator.timeout = 5.0

        patcher = patch('review_service.services.revalidation.requests.post')
        self.post = patcher.start()
        self.addCleanup(patcher.stop)

    def test_revalidate_posts_path(self):
        self.post.return_value = Mock(status_code=200)

        self.revalidator.revalidate('/courses/CS-1332/reviews')

        url = self.post.call_args[0][0]
        kwargs = self.post.call_args[1]
        self.assertEqual(url, 'https://courses.example.edu/api/revalidate')
        self.assertEqual(kwargs['json'], {'path': '/courses/CS-1332/reviews'})
        self.assertEqual(kwargs['headers'], {'Authorization': 'Bearer revalidate-token'})
        self.assertEqual(kwargs['timeout'], 5.0)

    def test_no_token_sends_no_auth_header(self):
        self.revalidator.token = ''
        self.post.return_value = Mock(status_code=200)

        self.revalidator.revalidate('/courses/CS-1332/reviews')

        self.assertEqual(self.post.call_args[1]['headers'], {})

    def test_unconfigured_url(self):
        self.revalidator.url = ''

        with self.assertRaises(UpstreamError):
            self.revalidator.revalidate('/courses/CS-1332/reviews')
        self.post.assert_not_called()

    def test_network_error(self):
        self.post.side_effect = requests.ConnectionError('unreachable')

        with self.assertRaises(UpstreamError):
            self.revalidator.revalidate('/courses/CS-1332/reviews')

    def test_error_status(self):
        self.post.return_value.raise_for_status.side_effect = requests.HTTPError('401')

        with self.assertRaises(UpstreamError):
            self.revalidator.revalidate('/courses/CS-1332/reviews')


if __name__ == '__main__':
    unittest.main()
