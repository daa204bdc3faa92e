import unittest

from gridpdf import props
from gridpdf.components import (
    Barcode,
    Col,
    MatrixCode,
    QrCode,
    Row,
    new_bar,
    new_bar_col,
    new_bar_row,
    new_matrix,
    new_matrix_col,
    new_matrix_row,
    new_qr,
    new_qr_col,
    new_qr_row,
)
from tests.test_support import PAGE_CELL, RecordingProvider, make_config


class TestBarcode(unittest.TestCase):
    def test_render_forwards_code_cell_and_prop(self) -> None:
        provider = RecordingProvider()
        prop = props.Barcode(percent=50, center=True)
        bar = new_bar("ABC-123", prop)

        bar.render(provider, PAGE_CELL)

        self.assertEqual(len(provider.calls), 1)
        call = provider.calls[0]
        self.assertEqual(call.name, "add_bar_code")
        self.assertEqual(call.args[0], "ABC-123")
        self.assertEqual(call.args[1], PAGE_CELL)
        self.assertEqual(call.args[2], prop.make_valid())

    def test_default_prop_is_normalized(self) -> None:
        bar = Barcode("1")
        self.assertEqual(bar.prop, props.Barcode().make_valid())
        self.assertEqual(bar.prop.type, props.BarcodeType.CODE39)

    def test_invalid_prop_is_corrected(self) -> None:
        bar = new_bar("1", props.Barcode(percent=150, left=-3, top=-1))
        self.assertEqual(bar.prop.percent, 100.0)
        self.assertEqual(bar.prop.left, 0.0)
        self.assertEqual(bar.prop.top, 0.0)

    def test_structure(self) -> None:
        node = new_bar("987", props.Barcode(type=props.BarcodeType.I2OF5)).get_structure()
        self.assertEqual(node.type, "barcode")
        self.assertEqual(node.value, "987")
        self.assertEqual(node.details["prop_type"], "i2of5")
        self.assertEqual(node.details["prop_percent"], 100.0)
        self.assertEqual(node.children, [])

    def test_set_config_is_stored(self) -> None:
        config = make_config()
        bar = new_bar("1")
        bar.set_config(config)
        self.assertIs(bar.config, config)


class TestRectCodes(unittest.TestCase):
    def test_matrix_render(self) -> None:
        provider = RecordingProvider()
        new_matrix("payload").render(provider, PAGE_CELL)
        self.assertEqual(provider.names(), ["add_matrix_code"])
        self.assertEqual(provider.calls[0].args[:2], ("payload", PAGE_CELL))
        self.assertEqual(provider.calls[0].args[2], props.Rect())

    def test_qr_render(self) -> None:
        provider = RecordingProvider()
        prop = props.Rect(left=2, top=3, percent=80)
        new_qr("https://example.com", prop).render(provider, PAGE_CELL)
        self.assertEqual(provider.names(), ["add_qr_code"])
        self.assertEqual(provider.calls[0].args[2], prop)

    def test_center_clears_offsets(self) -> None:
        qr = QrCode("x", props.Rect(left=5, top=5, center=True))
        self.assertEqual((qr.prop.left, qr.prop.top), (0.0, 0.0))

    def test_structure_types(self) -> None:
        self.assertEqual(MatrixCode("m").get_structure().type, "matrixcode")
        self.assertEqual(QrCode("q").get_structure().type, "qrcode")

    def test_structure_details(self) -> None:
        node = new_qr("q", props.Rect(left=4, percent=60, just_reference_width=True)).get_structure()
        self.assertEqual(
            node.details,
            {"prop_left": 4.0, "prop_percent": 60.0, "prop_just_reference_width": True},
        )


class TestConvenienceConstructors(unittest.TestCase):
    def test_col_wrappers(self) -> None:
        for factory, leaf_type in (
            (new_bar_col, Barcode),
            (new_matrix_col, MatrixCode),
            (new_qr_col, QrCode),
        ):
            with self.subTest(factory=factory.__name__):
                col = factory(4, "data")
                self.assertIsInstance(col, Col)
                self.assertEqual(col.get_size(), 4)
                self.assertEqual(len(col.components), 1)
                self.assertIsInstance(col.components[0], leaf_type)
                self.assertEqual(col.components[0].code, "data")

    def test_row_wrappers_use_auto_max_col(self) -> None:
        for factory, leaf_type in (
            (new_bar_row, Barcode),
            (new_matrix_row, MatrixCode),
            (new_qr_row, QrCode),
        ):
            with self.subTest(factory=factory.__name__):
                row = factory(25, "data")
                self.assertIsInstance(row, Row)
                self.assertEqual(row.get_height(), 25.0)
                self.assertEqual(len(row.cols), 1)
                col = row.cols[0]
                self.assertTrue(col.is_max)
                self.assertIsInstance(col.components[0], leaf_type)

    def test_row_wrapper_renders_full_width(self) -> None:
        provider = RecordingProvider()
        row = new_qr_row(30, "abc")
        row.set_config(make_config())
        row.render(provider, PAGE_CELL)
        self.assertEqual(provider.names(), ["create_col", "add_qr_code"])
        self.assertEqual(provider.calls[0].args[:2], (PAGE_CELL.width, 30.0))


if __name__ == "__main__":
    unittest.main()
