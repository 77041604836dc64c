"""
Unit tests for the group organizer.
"""

from photo_album.album import GroupOrganizer


class TestGroupOrganizer:
    """Tests for GroupOrganizer"""

    def test_groups_by_city_in_first_seen_order(self, make_photo):
        """Test groups keyed by exact city, in order of first appearance"""
        photos = [
            make_photo(0, "Rio", "2010-05-05 10:00:00"),
            make_photo(1, "Cordoba", "2011-05-05 10:00:00"),
            make_photo(2, "rio", "2012-05-05 10:00:00"),
            make_photo(3, "Rio", "2009-05-05 10:00:00"),
        ]

        album = GroupOrganizer().organize(photos)

        assert list(album) == ["Rio", "Cordoba", "rio"]
        assert len(album["Rio"]) == 2

    def test_sorted_by_date_with_group_metadata(self, make_photo):
        """Test records are ordered by date and carry index and size"""
        photos = [
            make_photo(0, "Rio", "2015-01-01 00:00:00"),
            make_photo(1, "Rio", "2010-01-01 00:00:00"),
            make_photo(2, "Rio", "2012-01-01 00:00:00"),
        ]

        group = GroupOrganizer().organize(photos)["Rio"]

        assert [photo.input_index for photo in group] == [1, 2, 0]
        assert [photo.group_index for photo in group] == [0, 1, 2]
        assert {photo.group_size for photo in group} == {3}

    def test_sort_uses_datetime_not_string(self, make_photo):
        """Test ordering compares times, including seconds"""
        photos = [
            make_photo(0, "Rio", "2010-01-01 10:00:01"),
            make_photo(1, "Rio", "2010-01-01 09:59:59"),
        ]

        group = GroupOrganizer().organize(photos)["Rio"]

        assert [photo.input_index for photo in group] == [1, 0]

    def test_duplicate_dates_keep_first_seen(self, make_photo):
        """Test later same-city, same-date records are discarded"""
        photos = [
            make_photo(0, "Rio", "2010-01-01 00:00:00", extension="png"),
            make_photo(1, "Rio", "2009-01-01 00:00:00"),
            make_photo(2, "Rio", "2010-01-01 00:00:00", extension="jpg"),
        ]

        group = GroupOrganizer().organize(photos)["Rio"]

        assert [photo.input_index for photo in group] == [1, 0]
        assert {photo.group_size for photo in group} == {2}
        assert group[1].value("image_file").extension == "png"

    def test_same_date_in_different_cities_kept(self, make_photo):
        """Test deduplication is per group"""
        photos = [
            make_photo(0, "Rio", "2010-01-01 00:00:00"),
            make_photo(1, "Cordoba", "2010-01-01 00:00:00"),
        ]

        album = GroupOrganizer().organize(photos)

        assert len(album["Rio"]) == 1
        assert len(album["Cordoba"]) == 1

    def test_input_records_untouched(self, make_photo):
        """Test grouping does not mutate the parsed records"""
        photos = [make_photo(0, "Rio", "2010-01-01 00:00:00")]

        GroupOrganizer().organize(photos)

        assert photos[0].group_index is None

    def test_empty_input(self):
        """Test no records give no groups"""
        assert GroupOrganizer().organize([]) == {}

    def test_custom_fields(self, make_photo):
        """Test grouping by another field"""
        photos = [
            make_photo(0, "Rio", "2010-01-01 00:00:00"),
            make_photo(1, "Cordoba", "2010-01-01 00:00:00"),
        ]

        album = GroupOrganizer(group_field="date", order_field="city").organize(photos)

        assert len(album) == 1
        assert [photo.value("city") for photo in next(iter(album.values()))] == ["Cordoba", "Rio"]
