GALLERIA_BASE_URL = 'https://primefaces.org/cdn/primevue/images/galleria'
PHOTO_COUNT = 15


class PhotoService:
    """Sample gallery images used as student photos until uploads exist."""

    def get_data(self):
        return [
            {
                'itemImageSrc': f"{GALLERIA_BASE_URL}/galleria{i}.jpg",
                'thumbnailImageSrc': f"{GALLERIA_BASE_URL}/galleria{i}s.jpg",
                'alt': f"Description for Image {i}",
                'title': f"Title {i}",
            }
            for i in range(1, PHOTO_COUNT + 1)
        ]
