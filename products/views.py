"""
Server-rendered product pages.

Every view reads and writes through request.product_context; missing
records become 404s, invalid submissions re-render the form.
"""
import logging

from django.http import Http404
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods, require_POST

from .exceptions import ProductNotFoundError
from .forms import ProductForm

logger = logging.getLogger(__name__)


def _get_product_or_404(request, id):
    product = request.product_context.find(id)
    if product is None:
        logger.warning("Product %s not found", id)
        raise Http404("Product not found")
    return product


@require_http_methods(['GET'])
def index(request):
    """List every product"""
    products = request.product_context.all()
    return render(request, 'products/index.html', {'products': products})


@require_http_methods(['GET'])
def details(request, id=None):
    product = _get_product_or_404(request, id)
    return render(request, 'products/details.html', {'product': product})


@require_http_methods(['GET', 'POST'])
def create(request):
    """
    GET: empty form.
    POST: store the product and go back to the list, or re-render the
    form with the submitted values and their errors.
    """
    if request.method == 'POST':
        form = ProductForm(request.POST)
        if form.is_valid():
            context = request.product_context
            context.add(form.to_product())
            context.save_changes()
            return redirect('products:index')
        logger.info("Rejected product create: %s", form.errors.get_json_data())
    else:
        form = ProductForm()
    return render(request, 'products/create.html', {'form': form})


@require_http_methods(['GET', 'POST'])
def edit(request, id=None):
    """
    GET: form pre-populated from the stored product.
    POST: overwrite the stored product. A hidden id that does not match
    the URL is treated the same as a missing product.
    """
    product = _get_product_or_404(request, id)

    if request.method == 'POST':
        form = ProductForm(request.POST)
        if form.is_valid():
            posted_id = form.cleaned_data.get('id')
            if posted_id is not None and posted_id != product.pk:
                logger.warning("Edit of product %s posted id %s", product.pk, posted_id)
                raise Http404("Product not found")
            context = request.product_context
            context.update(form.to_product(product))
            try:
                context.save_changes()
            except ProductNotFoundError:
                logger.warning("Product %s was deleted before the edit was saved", product.pk)
                raise Http404("Product not found")
            return redirect('products:index')
    else:
        form = ProductForm.for_product(product)
    return render(request, 'products/edit.html', {'form': form, 'product': product})


@require_http_methods(['GET', 'POST'])
def delete(request, id=None):
    """GET: confirmation page. POST: see delete_confirmed"""
    if request.method == 'POST':
        return delete_confirmed(request, id)
    product = _get_product_or_404(request, id)
    return render(request, 'products/delete.html', {'product': product})


@require_POST
def delete_confirmed(request, id):
    context = request.product_context
    product = context.find(id)
    if product is not None:
        context.remove(product)
        context.save_changes()
    return redirect('products:index')
