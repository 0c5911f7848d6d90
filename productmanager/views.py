from django.shortcuts import redirect


def home(request):
    """Landing page: the product list"""
    return redirect('products:index')
