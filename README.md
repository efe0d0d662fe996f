# jpegdecode

A small baseline JPEG decoder written in pure Python. It reads a sequential
(SOF0) JPEG file and decodes its Huffman-coded blocks. It then undoes
quantization and the zig-zag ordering, applies an inverse DCT, upsamples
chroma by pixel replication and converts YCbCr to RGB.

The output is written next to the input file, with the extension replaced:

- Colour images (three components in the scan) are written as binary PPM (`P6`).
- Greyscale images (one component) are written as binary PGM (`P5`).

## Installation

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Command line

```
jpeg2ppm images/photo.jpg
```

This writes `images/photo.ppm` for a three-component image, or
`images/photo.pgm` for a single-component one.

You can choose which inverse DCT is used:

- `--loeffler` (the default) uses the fast Loeffler factorisation.
- `--classic` uses the direct mathematical formula.

```
jpeg2ppm images/photo.jpg --classic
```

Any other option is rejected. The command exits with status 1 in these cases:

- the file is missing;
- the file cannot be opened;
- the file cannot be decoded.

In each case a message is printed on standard error.

### Timing both transforms

```
jpeg2ppm-benchmark --images images/ --repetitions 5
```

This runs the decoder on every regular `.jpg` / `.jpeg` file (in any case) of
the directory. Each file is decoded `--repetitions` times with the fast
transform and the same number of times with `--classic`. The command then
prints the mean wall time of each, in milliseconds.

Options:

- `--images` sets the directory. The default is `../images/`.
- `--repetitions` sets how many runs each measurement averages. The default is 5.
- `--decoder` sets the decoder command line. The default is
  `python -m jpegdecode.cli` with the running interpreter.

If a run of a file fails, that file is reported as an error and skipped.

## Library use

```python
from jpegdecode.cli import decode_file

output = decode_file("images/photo.jpg", use_loeffler=True)  # path of the written file
```

`decode_file` raises `jpegdecode.metadata.JpegFormatError` when:

- the file is not a JPEG this decoder handles;
- the scan does not have one or three components.

The pipeline stages can also be used one by one:

- `jpegdecode.metadata.read_metadata(file)` parses the headers, from SOI up to
  and including SOS, into a `JpegMetadata`. This covers the SOF0, DQT, DHT and
  DRI segments; other segments are skipped.
- `jpegdecode.blocks.read_scan_data(file, position)` returns the
  entropy-coded bytes and stops at EOI. It drops the stuffed `00` after `FF`
  and removes restart markers. Wrap the result in a
  `jpegdecode.bitstream.BitStream`, which reads bits MSB first and raises
  `BitStreamError` past the end.
- Huffman decoding is done by the functions of `jpegdecode.huffman`:
  - `build_huffman_tree` builds a tree;
  - `decode_symbol` and `read_magnitude` read single values;
  - `decode_block` decodes one 64-coefficient block, using a `DcPredictor`
    for the DC difference.
- `jpegdecode.blocks` groups blocks into MCUs:
  - `extract_grayscale_blocks` covers single-component images;
  - `decode_mcus`, `decode_mcu` and `decode_component_blocks` cover colour
    images;
  - `mcu_count` gives the number of MCUs.
- These functions rebuild 8x8 sample blocks:
  - `jpegdecode.quantization.dequantize`;
  - `jpegdecode.zigzag.inverse_zigzag`;
  - `jpegdecode.idct.idct_8x8` and `jpegdecode.fast_idct.idct_loeffler_2d`
    (with `loeffler_idct_1d` for one dimension).
- `jpegdecode.reassemble.assemble_blocks` lays out the blocks of one
  component of an MCU as a single array.
- `jpegdecode.upsampling.upsample_chroma` stretches a chroma plane to the luma
  size. Pixels are produced by two functions of `jpegdecode.color`, which
  return `Pixel` values:
  - `ycbcr_to_rgb` for colour;
  - `grayscale_to_rgb` for grey.
- Whole images are decoded by two pairs of functions:
  - `jpegdecode.grayscale.decode_grayscale` and
    `jpegdecode.colour_image.decode_colour` return rows of pixels;
  - `process_grayscale_image` and `process_colour_image` also write the file
    and return its path.
- `jpegdecode.ppm.write_ppm` and `write_pgm` write images. PGM output takes
  the red channel.

## Limitations

- Only baseline sequential JPEG (SOF0) with a single scan of one or three
  components is decoded. Progressive, lossless and arithmetic-coded files are
  not supported.
- Restart markers are removed from the scan data, but DC prediction is not
  reset at them. Images that use restart intervals may therefore decode
  incorrectly.
- Quantization table 0 is used for luminance and table 1 for both chroma
  components, whatever the frame header says.
- Chroma upsampling replicates samples. No interpolation is done.
- The only output formats are PPM and PGM. The decoder does not display
  images.