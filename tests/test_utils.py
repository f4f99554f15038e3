"""
Test cases for EPUB utility functions.
"""

import logging
import os
import shutil
import tempfile
import unittest
from pathlib import Path

from epub_loader.exceptions import DocumentFormatError
from epub_loader.types import EpubInfo
from epub_loader.utils import format_file_size, get_epub_info, time_block, validate_epub

from ebooklib import epub


class TestEpubUtils(unittest.TestCase):
    """Test cases for EPUB utility functions."""

    @classmethod
    def setUpClass(cls):
        """Create a temporary test EPUB file."""
        cls.temp_dir = tempfile.mkdtemp()
        cls.test_epub_path = os.path.join(cls.temp_dir, 'test.epub')

        book = epub.EpubBook()
        book.set_identifier('urn:test:utils')
        book.set_title('Utility Test')
        book.set_language('en')
        chapter = epub.EpubHtml(title='Only', file_name='only.xhtml', lang='en')
        chapter.content = '<p>Only page</p>'
        book.add_item(chapter)
        book.add_item(epub.EpubNcx())
        book.add_item(epub.EpubNav())
        book.toc = [epub.Link('only.xhtml', 'Only', 'only')]
        book.spine = [chapter]
        epub.write_epub(cls.test_epub_path, book)

    @classmethod
    def tearDownClass(cls):
        """Clean up temporary files."""
        shutil.rmtree(cls.temp_dir, ignore_errors=True)

    def test_validate_epub_valid_file(self):
        """Test validation with a valid EPUB file."""
        is_valid, error_msg = validate_epub(self.test_epub_path)
        self.assertTrue(is_valid)
        self.assertEqual(error_msg, "")

    def test_validate_epub_nonexistent_file(self):
        """Test validation with non-existent file."""
        is_valid, error_msg = validate_epub('/nonexistent/file.epub')
        self.assertFalse(is_valid)
        self.assertIn('not found', error_msg.lower())

    def test_validate_epub_directory(self):
        """Test validation with a directory path."""
        is_valid, error_msg = validate_epub(self.temp_dir)
        self.assertFalse(is_valid)
        self.assertIn('not a file', error_msg.lower())

    def test_validate_epub_not_a_container(self):
        """Test validation with a plain text file."""
        temp_file = os.path.join(self.temp_dir, 'test.txt')
        Path(temp_file).write_text('test')

        is_valid, error_msg = validate_epub(temp_file)
        self.assertFalse(is_valid)
        self.assertIn('invalid', error_msg.lower())

    def test_get_epub_info_valid_file(self):
        """Test getting info from a valid EPUB."""
        info = get_epub_info(self.test_epub_path)

        self.assertIsInstance(info, EpubInfo)
        self.assertEqual(info.num_pages, 1)
        self.assertEqual(info.title, 'Utility Test')
        self.assertGreater(info.file_size, 0)

    def test_get_epub_info_nonexistent_file(self):
        """Test getting info from non-existent file."""
        with self.assertRaises(DocumentFormatError):
            get_epub_info('/nonexistent/file.epub')

    def test_format_file_size(self):
        """Test file size formatting."""
        self.assertEqual(format_file_size(500), '500.0 B')
        self.assertEqual(format_file_size(1024), '1.0 KB')
        self.assertEqual(format_file_size(1024 * 1024), '1.0 MB')
        self.assertEqual(format_file_size(1536), '1.5 KB')

    def test_time_block_logs_completion(self):
        """Test that time_block reports elapsed time."""
        logger = logging.getLogger('epub_loader.tests')
        with self.assertLogs(logger, level='INFO') as captured:
            with time_block(logger, 'scan'):
                pass
        self.assertTrue(any('scan completed in' in line for line in captured.output))


if __name__ == '__main__':
    unittest.main()
