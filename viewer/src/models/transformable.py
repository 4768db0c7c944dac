"""Capability mixin for components whose image can be affine-transformed."""


class TransformableImage:
    """Mixin for base components that expose an image affine transform.

    A light table only allows the IMAGE_TRANSLATE and IMAGE_ROTATE modes over
    components that carry this mixin. Plain mixin (no ABC) so it can be
    combined with QWidget subclasses.

    Expected methods (implemented by the main class):
    - image_affine() -> QTransform
    - set_image_affine(transform: QTransform)
    """

    def image_affine(self):
        """Get the current image-to-component transform."""
        raise NotImplementedError(f"{type(self).__name__} must implement image_affine()")

    def set_image_affine(self, transform):
        """Replace the image-to-component transform."""
        raise NotImplementedError(f"{type(self).__name__} must implement set_image_affine()")
