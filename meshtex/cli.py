"""
meshtex CLI - Command-line interface for texture coordinates and composition
"""

import json
import logging
import sys
from pathlib import Path

import click
from PIL import Image
from pydantic import ValidationError

from meshtex import __version__
from meshtex.errors import InvalidInputShapeError, UnsupportedModeError
from meshtex.schema.texture import TextureDescriptor, load_descriptor
from meshtex.texcoords.functions import TexCoordFunction
from meshtex.texturing.composite import CompositeMode, CompositeTexture, stack_of
from meshtex.texturing.sources import ImageTexture

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


def _open_texture(path: str) -> ImageTexture:
    """Decode an image file into a texture with a unit descriptor."""
    if not Path(path).exists():
        raise FileNotFoundError(f"Texture file not found: {path}")
    with Image.open(path) as image:
        image.load()
        return ImageTexture(
            descriptor=TextureDescriptor(width=1.0, height=1.0),
            image=image.convert('RGBA'),
            name=Path(path).name,
        )


def _fail(prefix: str, error: Exception, verbose: bool = False) -> None:
    click.secho(f"{prefix}: {error}", fg='red', err=True)
    if verbose:
        import traceback
        traceback.print_exc()
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    meshtex - Texture coordinates and texture composition for 3D meshes.

    Examples:
        meshtex texcoords wall.json --function strip_wall --width 2 --height 1
        meshtex stack base.png dirt.png -o out.png
    """
    pass


@cli.command()
@click.argument('vertices_path')
@click.option('--function', 'function_name', default='global_x_z',
              help=f"Coordinate function ({', '.join(f.value for f in TexCoordFunction)})")
@click.option('--width', type=float, default=1.0, help='World width of one texture repeat')
@click.option('--height', type=float, default=1.0, help='World height of one texture repeat')
@click.option('--width-per-entity', type=float, default=None, help='World width of one discrete element')
@click.option('--height-per-entity', type=float, default=None, help='World height of one discrete element')
@click.option('--material', default=None, help='JSON material file (overrides the size options)')
@click.option('-o', '--output', default=None, help='Output JSON file (default: stdout)')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def texcoords(vertices_path, function_name, width, height, width_per_entity,
              height_per_entity, material, output, verbose):
    """
    Calculate texture coordinates for a JSON list of [x, y, z] vertices.

    Examples:
        meshtex texcoords roof.json --function sloped_triangles
        meshtex texcoords wall.json --material planks.json -o uv.json
    """
    _configure_logging(verbose)
    try:
        if not Path(vertices_path).exists():
            raise FileNotFoundError(f"Vertex file not found: {vertices_path}")
        with open(vertices_path, 'r') as f:
            vertices = json.load(f)

        if material:
            descriptor = load_descriptor(material)
        else:
            descriptor = TextureDescriptor(
                width=width,
                height=height,
                width_per_entity=width_per_entity,
                height_per_entity=height_per_entity,
                coord_function=function_name,
            )

        coords = descriptor.tex_coords(vertices)
        text = json.dumps([list(c) for c in coords], indent=2)

        if output:
            with open(output, 'w') as f:
                f.write(text)
            click.secho(f"✓ Wrote {len(coords)} coordinates to {output}", fg='green')
        else:
            click.echo(text)

    except FileNotFoundError as e:
        _fail("Error", e)
    except InvalidInputShapeError as e:
        _fail("Invalid input", e)
    except ValidationError as e:
        _fail("Invalid texture", e)
    except ValueError as e:
        _fail("Error", e)
    except UnsupportedModeError as e:
        _fail("Internal error", e, verbose)


@cli.command()
@click.argument('texture_a')
@click.argument('texture_b')
@click.option('-o', '--output', required=True, help='Output image path')
@click.option('--mode', type=click.Choice([m.value for m in CompositeMode]),
              default=CompositeMode.STACKED.value, help='How the textures are combined')
@click.option('--no-rescale', is_flag=True, help='Tile the smaller texture instead of resampling')
@click.option('--legacy-tiling', is_flag=True, help='Reproduce the historical non-rescaled sizing')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def composite(texture_a, texture_b, output, mode, no_rescale, legacy_tiling, verbose):
    """
    Combine two textures into one image.

    Examples:
        meshtex composite grass.png flowers.png -o meadow.png
        meshtex composite mask.png color.png -o sign.png --mode alpha_from_a
    """
    _configure_logging(verbose)
    try:
        result = CompositeTexture(
            CompositeMode(mode),
            not no_rescale,
            _open_texture(texture_a),
            _open_texture(texture_b),
            legacy_tiling=legacy_tiling,
        )
        image = result.get_image()
        image.save(output)
        logger.info(f"Saved {result!r} to {output}")
        click.secho(f"✓ Success! {image.width}x{image.height} image saved to {output}", fg='green')

    except FileNotFoundError as e:
        _fail("Error", e)
    except (ValueError, OSError) as e:
        _fail("Error", e, verbose)


@cli.command()
@click.argument('layers', nargs=-1)
@click.option('-o', '--output', required=True, help='Output image path')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def stack(layers, output, verbose):
    """
    Stack textures, ordered bottom to top, into one image.

    Without layers, a transparent placeholder is written.

    Examples:
        meshtex stack asphalt.png markings.png cracks.png -o road.png
    """
    _configure_logging(verbose)
    try:
        result = stack_of([_open_texture(path) for path in layers])
        image = result.get_image()
        image.save(output)
        logger.info(f"Saved {result!r} to {output}")
        click.secho(f"✓ Success! Stacked {len(layers)} layers into {output}", fg='green')

    except FileNotFoundError as e:
        _fail("Error", e)
    except (ValueError, OSError) as e:
        _fail("Error", e, verbose)


def main():
    """Entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
