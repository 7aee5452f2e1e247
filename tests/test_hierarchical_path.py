import pytest

from uricomponents import ComponentSyntaxError
from uricomponents import ComponentTypeError
from uricomponents import HierarchicalPath
from uricomponents import OffsetOutOfBounds
from uricomponents import Path
from uricomponents import PathType
from uricomponents import PathTypeNotFound


@pytest.fixture
def path():
    return HierarchicalPath('/a/b/c')


class TestSegments:
    @pytest.mark.parametrize(
        'raw,segments',
        [
            ('', ('',)),
            ('/', ('',)),
            ('a', ('a',)),
            ('/a/b/c', ('a', 'b', 'c')),
            ('a/b/', ('a', 'b', '')),
            ('/a//b', ('a', '', 'b')),
            ('/a%20b/c%2Fd', ('a b', 'c%2Fd')),
            ('/caf%C3%A9', ('café',)),
        ],
    )
    def test_segments(self, raw, segments):
        path = HierarchicalPath(raw)
        assert path.segments == segments
        assert len(path) == len(segments)
        assert tuple(path) == segments

    def test_from_path_instance(self):
        path = Path('/a/b')
        assert HierarchicalPath(path).segments == ('a', 'b')
        assert str(HierarchicalPath(path)) == '/a/b'

    def test_none(self):
        with pytest.raises(ComponentTypeError):
            HierarchicalPath(None)

    @pytest.mark.parametrize(
        'offset,expected',
        [(0, 'a'), (2, 'c'), (-1, 'c'), (-3, 'a'), (3, None), (-4, None)],
    )
    def test_get(self, path, offset, expected):
        assert path.get(offset) == expected

    def test_getitem(self, path):
        assert path[0] == 'a'
        assert path[-1] == 'c'

    @pytest.mark.parametrize('offset', [3, -4, 100])
    def test_getitem_out_of_bounds(self, path, offset):
        with pytest.raises(OffsetOutOfBounds):
            path[offset]

        with pytest.raises(IndexError):
            path[offset]

    def test_keys(self):
        path = HierarchicalPath('/a/b/a/')
        assert path.keys('a') == [0, 2]
        assert path.keys('') == [3]
        assert path.keys('z') == []

    def test_content(self):
        path = HierarchicalPath('/a b/c')
        assert path.get_content() == '/a%20b/c'
        assert path.decoded() == '/a b/c'
        assert path.is_absolute()
        assert not path.has_trailing_slash()

    @pytest.mark.parametrize(
        'raw,segments',
        [
            ('/%4%31', ('%2541',)),
            ('/a/%%32%30b', ('a', '%2520b')),
            ('a%%2F', ('a%25%2F',)),
        ],
    )
    def test_stray_percent_segments(self, raw, segments):
        path = HierarchicalPath(raw)
        assert path.segments == segments
        assert HierarchicalPath(str(path)).segments == segments
        assert HierarchicalPath(str(path)) == path

    def test_prop_segments_round_trip(self, util):
        cases = util.arbitrary_strings(
            count=500, length=24, alphabet=util.ENCODED_ALPHABET
        )
        for case in cases:
            path = HierarchicalPath(case)
            copy = HierarchicalPath(str(path))
            assert copy.segments == path.segments
            assert copy.is_absolute() is path.is_absolute()


class TestCreateFromSegments:
    @pytest.mark.parametrize(
        'segments,path_type,expected',
        [
            (['a', 'b', ''], PathType.ABSOLUTE, '/a/b/'),
            (['a', 'b'], PathType.RELATIVE, 'a/b'),
            (['a', 'b'], 1, '/a/b'),
            (['a', 'b'], 0, 'a/b'),
            (['', 'a'], PathType.RELATIVE, 'a'),
            (['', 'a'], PathType.ABSOLUTE, '/a'),
            ([], PathType.RELATIVE, ''),
            ([], PathType.ABSOLUTE, '/'),
            (['a b', 42], PathType.RELATIVE, 'a%20b/42'),
            ((segment for segment in ['x', 'y']), PathType.RELATIVE, 'x/y'),
        ],
    )
    def test_create(self, segments, path_type, expected):
        path = HierarchicalPath.create_from_segments(segments, path_type)
        assert str(path) == expected

    def test_default_type(self):
        path = HierarchicalPath.create_from_segments(['a'])
        assert not path.is_absolute()

    @pytest.mark.parametrize('path_type', [2, -1, 'absolute', None])
    def test_invalid_type(self, path_type):
        with pytest.raises(PathTypeNotFound):
            HierarchicalPath.create_from_segments(['a'], path_type)

    def test_invalid_segment(self):
        with pytest.raises(ComponentTypeError):
            HierarchicalPath.create_from_segments(['a', None])

        with pytest.raises(ComponentTypeError):
            HierarchicalPath.create_from_segments(['a', b'b'])


class TestProperties:
    @pytest.mark.parametrize(
        'raw,expected',
        [
            ('/a/b/c', '/a/b'),
            ('/a/b/', '/a'),
            ('/a', '/'),
            ('/', '/'),
            ('a/b', 'a'),
            ('a', '.'),
            ('', ''),
        ],
    )
    def test_dirname(self, raw, expected):
        assert HierarchicalPath(raw).get_dirname() == expected

    @pytest.mark.parametrize(
        'raw,expected',
        [
            ('/a/b/c.txt', 'c.txt'),
            ('/a/b/', ''),
            ('', ''),
            ('a', 'a'),
        ],
    )
    def test_basename(self, raw, expected):
        assert HierarchicalPath(raw).get_basename() == expected

    @pytest.mark.parametrize(
        'raw,expected',
        [
            ('/a/file.tar.gz;v=1', 'gz'),
            ('/a/file.txt', 'txt'),
            ('/a/file', ''),
            ('/a/file.', ''),
            ('/a.d/file', ''),
            ('/a/', ''),
        ],
    )
    def test_extension(self, raw, expected):
        assert HierarchicalPath(raw).get_extension() == expected


class TestModifiers:
    def test_append(self, path):
        assert str(path.append('d')) == '/a/b/c/d'
        assert str(path.append('/d/e')) == '/a/b/c/d/e'
        assert str(HierarchicalPath('/a/').append('b')) == '/a/b'
        assert str(HierarchicalPath('').append('a')) == '/a'

    def test_prepend(self, path):
        assert str(path.prepend('x')) == 'x/a/b/c'
        assert str(path.prepend('/x/')) == '/x/a/b/c'
        assert str(HierarchicalPath('a').prepend('x y')) == 'x%20y/a'

    @pytest.mark.parametrize('method', ['append', 'prepend'])
    def test_none_segment(self, path, method):
        with pytest.raises(ComponentTypeError):
            getattr(path, method)(None)

    @pytest.mark.parametrize(
        'key,segment,expected',
        [
            (0, 'x', '/x/b/c'),
            (1, 'x', '/a/x/c'),
            (-3, 'x', '/x/b/c'),
            (3, 'd', '/a/b/c/d'),
            (1, 'x y', '/a/x%20y/c'),
            (1, Path('x%2Fy'), '/a/x%2Fy/c'),
        ],
    )
    def test_with_segment(self, path, key, segment, expected):
        assert str(path.with_segment(key, segment)) == expected

    def test_with_segment_negative_key_compat(self, path):
        # NOTE: Negative keys are shifted by the number of segments first,
        #   so -1 replaces the last segment and only -n - 1 prepends.
        assert str(path.with_segment(-1, 'x')) == '/a/b/x'
        assert str(path.with_segment(-4, 'x')) == 'x/a/b/c'
        assert path.with_segment(-4, 'x') == path.prepend('x')

    def test_with_segment_at_end_appends(self, path):
        assert path.with_segment(len(path), 'd') == path.append('d')

    def test_with_segment_relative(self):
        path = HierarchicalPath('a/b')
        assert str(path.with_segment(0, 'x')) == 'x/b'

    def test_with_segment_unchanged(self, path):
        assert path.with_segment(1, 'b') is path
        assert path.with_segment(-1, 'c') is path

    @pytest.mark.parametrize('key', [4, -5, 100])
    def test_with_segment_out_of_bounds(self, path, key):
        with pytest.raises(OffsetOutOfBounds):
            path.with_segment(key, 'x')

    @pytest.mark.parametrize(
        'keys,expected',
        [
            ((0,), '/b/c'),
            ((0, -1), '/b'),
            ((1, 1), '/a/c'),
            ((0, 1, 2), '/'),
            ((-2,), '/a/c'),
        ],
    )
    def test_without_segment(self, path, keys, expected):
        assert str(path.without_segment(*keys)) == expected

    def test_without_segment_relative(self):
        assert str(HierarchicalPath('a/b/c').without_segment(0)) == 'b/c'

    @pytest.mark.parametrize('key', [3, -4, True, '1', 1.0])
    def test_without_segment_invalid(self, path, key):
        with pytest.raises(OffsetOutOfBounds):
            path.without_segment(key)

    def test_without_empty_segments(self):
        path = HierarchicalPath('/a//b///c/')
        assert str(path.without_empty_segments()) == '/a/b/c/'

        path = HierarchicalPath('/a/b')
        assert path.without_empty_segments() is path

    def test_without_dot_segments(self):
        path = HierarchicalPath('/a/b/../c/./d')
        new_path = path.without_dot_segments()
        assert new_path.segments == ('a', 'c', 'd')
        assert type(new_path) is HierarchicalPath

    def test_immutability(self, path):
        path.append('d')
        path.without_segment(0)
        path.with_segment(0, 'x')
        assert str(path) == '/a/b/c'
        assert path.segments == ('a', 'b', 'c')


class TestDirnameAndBasename:
    @pytest.mark.parametrize(
        'raw,dirname,expected',
        [
            ('/a/b/c', '/x/y', '/x/y/c'),
            ('/a/b/c', '/x/y/', '/x/y/c'),
            ('a/b/c', 'x', 'x/c'),
            ('/a/b/c', Path('/x'), '/x/c'),
        ],
    )
    def test_with_dirname(self, raw, dirname, expected):
        assert str(HierarchicalPath(raw).with_dirname(dirname)) == expected

    def test_with_dirname_unchanged(self, path):
        assert path.with_dirname('/a/b') is path

    @pytest.mark.parametrize('dirname', ['/a b', '/a%20b', Path('/a b')])
    def test_with_dirname_unchanged_when_encoded(self, dirname):
        path = HierarchicalPath('/a%20b/c')
        assert path.with_dirname(dirname) is path

    @pytest.mark.parametrize(
        'raw,basename,expected',
        [
            ('/a/b/c', 'd', '/a/b/d'),
            ('/a/b/', 'd', '/a/b/d'),
            ('/a/b/c', 'd e', '/a/b/d%20e'),
            ('/a/b/c', 'd%2Fe', '/a/b/d%2Fe'),
        ],
    )
    def test_with_basename(self, raw, basename, expected):
        assert str(HierarchicalPath(raw).with_basename(basename)) == expected

    def test_with_basename_unchanged(self, path):
        assert path.with_basename('c') is path

    @pytest.mark.parametrize('basename', ['d/e', None])
    def test_with_basename_invalid(self, path, basename):
        with pytest.raises(ComponentSyntaxError):
            path.with_basename(basename)

    @pytest.mark.parametrize(
        'raw,extension,expected',
        [
            ('/a/b/c', 'html', '/a/b/c.html'),
            ('/a/b/c.txt', 'csv', '/a/b/c.csv'),
            ('/a/b/c.txt;v=1', 'csv', '/a/b/c.csv;v=1'),
            ('/a/b/c.tar.gz', 'bz2', '/a/b/c.tar.bz2'),
            ('/a/b/c.txt', '', '/a/b/c'),
            ('/a/b/c.txt;v=1', '', '/a/b/c;v=1'),
            ('/a/b/', 'txt', '/a/b/'),
        ],
    )
    def test_with_extension(self, raw, extension, expected):
        assert str(HierarchicalPath(raw).with_extension(extension)) == expected

    def test_with_extension_unchanged(self):
        path = HierarchicalPath('/a/b/c.txt')
        assert path.with_extension('txt') is path

    @pytest.mark.parametrize('extension', ['.txt', 'a/b', None])
    def test_with_extension_invalid(self, path, extension):
        with pytest.raises(ComponentSyntaxError):
            path.with_extension(extension)
